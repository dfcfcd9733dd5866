"""
Fixed section order of the two document templates.

Résumé (履歴書):
    title → basic_info → history → qualifications → motivation → self_pr → remarks

Career history (職務経歴書):
    title → basic_info → summary → career_history_1..N → skills

Optional sections with nothing to show are left out, so a snapshot with only
the required personal fields yields just the title and the basic info table.
"""

from datetime import date
from typing import List

from rireki.contexts.layout import PageGeometry
from rireki.contexts.modeling import (
    CareerFormData,
    ResumeFormData,
    build_career_blocks,
    build_history_sections,
    build_qualification_section,
    labels,
)
from rireki.contexts.rendering.blocks import (
    BasicInfoBlock,
    CareerEntryBlock,
    HeadedTextBlock,
    LabeledTextBlock,
    SectionBlock,
    SkillsTableBlock,
    TitleBlock,
    YearMonthTableBlock,
    as_of_stamp,
)
from rireki.contexts.rendering.fonts import FontRegistry
from rireki.utils.text_processing import is_blank


def resume_blocks(
    snapshot: ResumeFormData,
    fonts: FontRegistry,
    geometry: PageGeometry,
    today: date,
) -> List[SectionBlock]:
    """
    Build the résumé sections in template order.

    Raises:
        PhotoDecodeError: If the snapshot carries a photo that cannot be decoded
    """
    width = geometry.usable_width_mm
    blocks: List[SectionBlock] = [
        TitleBlock(fonts, width, labels.RESUME_TITLE, as_of_stamp(today)),
        BasicInfoBlock(fonts, width, snapshot.profile, today, photo=snapshot.photo),
    ]

    history = build_history_sections(snapshot)
    if history:
        blocks.append(
            YearMonthTableBlock(
                fonts,
                width,
                name="history",
                header_label=labels.HISTORY_TABLE_HEADER,
                sections=history,
                closing_label=labels.END_OF_HISTORY,
            )
        )

    qualifications = build_qualification_section(snapshot)
    if qualifications:
        blocks.append(
            YearMonthTableBlock(
                fonts,
                width,
                name="qualifications",
                header_label=labels.QUALIFICATIONS_HEADER,
                sections=[qualifications],
            )
        )

    for name, label, text in (
        ("motivation", labels.MOTIVATION_LABEL, snapshot.motivation),
        ("self_pr", labels.SELF_PR_LABEL, snapshot.self_pr),
        ("remarks", labels.REMARKS_LABEL, snapshot.remarks),
    ):
        if not is_blank(text):
            blocks.append(LabeledTextBlock(fonts, width, name, label, text))

    return blocks


def career_blocks(
    snapshot: CareerFormData,
    fonts: FontRegistry,
    geometry: PageGeometry,
    today: date,
) -> List[SectionBlock]:
    """Build the career history sections in template order."""
    width = geometry.usable_width_mm
    blocks: List[SectionBlock] = [
        TitleBlock(fonts, width, labels.CAREER_TITLE, as_of_stamp(today)),
        BasicInfoBlock(fonts, width, snapshot.profile, today, with_photo=False, contact_when_present=True),
    ]

    if not is_blank(snapshot.summary):
        blocks.append(HeadedTextBlock(fonts, width, "summary", labels.SUMMARY_HEADING, snapshot.summary))

    # One section per employer so long histories break between companies
    for number, block in enumerate(build_career_blocks(snapshot.career_history), start=1):
        heading = labels.CAREER_HISTORY_HEADING if number == 1 else None
        blocks.append(CareerEntryBlock(fonts, width, f"career_history_{number}", block, heading=heading))

    if snapshot.skills:
        blocks.append(SkillsTableBlock(fonts, width, snapshot.skills))

    return blocks
