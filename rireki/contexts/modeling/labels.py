"""
Fixed Japanese vocabulary for résumé and career history documents.

Shared by the row builders (modeling) and the section blocks (rendering).
"""

# Section headings inside the combined history table
EDUCATION_HEADING = "学　歴"
WORK_HISTORY_HEADING = "職　歴"
HISTORY_TABLE_HEADER = "学歴・職歴"
QUALIFICATIONS_HEADER = "資格・免許"
YEAR_HEADER = "年"
MONTH_HEADER = "月"
END_OF_HISTORY = "以上"

# Education events
SCHOOL_ENTRY = "入学"
ENROLLED = "在学中"
ON_LEAVE = "休学中"
GRADUATED = "卒業"
WITHDRAWN = "中退"
COMPLETED = "修了"

# Work history events
COMPANY_ENTRY = "入社"
EMPLOYED = "在職中"
RESIGNED = "退社"

# Career history
CURRENTLY_EMPLOYED = "在職中"
PERIOD_SEPARATOR = " 〜 "
DEPARTMENT_PREFIX = "部署："
POSITION_PREFIX = "役職："
AFFILIATION_SEPARATOR = " | "
JOB_DESCRIPTION_HEADING = "【業務内容】"
ACHIEVEMENTS_HEADING = "【実績・成果】"
TECHNOLOGIES_HEADING = "【使用技術・スキル】"

EMPLOYMENT_TYPE_LABELS = {
    "fullTime": "正社員",
    "contract": "契約社員",
    "partTime": "アルバイト・パート",
    "dispatch": "派遣",
}

GENDER_LABELS = {
    "male": "男",
    "female": "女",
}

# Document titles and block labels
RESUME_TITLE = "履 歴 書"
CAREER_TITLE = "職務経歴書"
AS_OF_SUFFIX = " 現在"
PHOTO_PLACEHOLDER = "写真"
MOTIVATION_LABEL = "志望動機"
SELF_PR_LABEL = "自己PR"
REMARKS_LABEL = "本人希望欄"
SUMMARY_HEADING = "職務要約"
CAREER_HISTORY_HEADING = "職務経歴"
SKILLS_HEADING = "保有スキル"
