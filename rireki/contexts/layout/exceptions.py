"""Custom exceptions for the layout context."""


class LayoutError(ValueError):
    """
    Exception raised for impossible layout input: negative section heights,
    a page geometry with no usable area, or an unusable layout preset.
    """

    pass
