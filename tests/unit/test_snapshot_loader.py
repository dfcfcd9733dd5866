"""Unit tests for building typed snapshots from saved form data."""

import json
from datetime import date

import pytest

from rireki.contexts.calendar import CalendarDate, MalformedDateError, YearMonth
from rireki.contexts.intake import (
    career_snapshot_from_dict,
    load_career_snapshot,
    load_form_data,
    load_resume_snapshot,
    parse_birth_date,
    resume_snapshot_from_dict,
)
from rireki.contexts.modeling import (
    Employed,
    EmploymentType,
    Enrolled,
    Gender,
    Graduated,
    InvalidSnapshotError,
    Resigned,
    build_work_history_rows,
)

TODAY = date(2024, 4, 1)


@pytest.fixture
def required_fields():
    return {
        "name": "山田 太郎",
        "furigana": "やまだ たろう",
        "birthDate": "1995/04/02",
        "gender": "male",
    }


@pytest.mark.unit
def test_minimal_resume_snapshot(required_fields):
    """Test a snapshot with required personal fields only."""
    snapshot = resume_snapshot_from_dict(required_fields, TODAY)

    assert snapshot.profile.name == "山田 太郎"
    assert snapshot.profile.birth_date == CalendarDate(1995, 4, 2)
    assert snapshot.profile.gender is Gender.MALE
    assert snapshot.photo is None
    assert snapshot.education == ()
    assert snapshot.work_history == ()
    assert snapshot.qualifications == ()


@pytest.mark.unit
@pytest.mark.parametrize("missing", ["name", "furigana", "birthDate", "gender"])
def test_missing_required_field_fails_snapshot(required_fields, missing):
    """Test that each required personal field is enforced."""
    del required_fields[missing]

    with pytest.raises(InvalidSnapshotError, match=missing):
        resume_snapshot_from_dict(required_fields, TODAY)


@pytest.mark.unit
def test_unknown_gender_fails_snapshot(required_fields):
    """Test that gender must be male or female."""
    required_fields["gender"] = "other"

    with pytest.raises(InvalidSnapshotError):
        resume_snapshot_from_dict(required_fields, TODAY)


@pytest.mark.unit
@pytest.mark.parametrize("birth_date", ["2024/02/30", "1899/12/31", "2025/01/01", "1995-04-02"])
def test_invalid_birth_date_fails_snapshot(required_fields, birth_date):
    """Test strict birth date parsing with the 1900..current year range."""
    required_fields["birthDate"] = birth_date

    with pytest.raises(MalformedDateError):
        resume_snapshot_from_dict(required_fields, TODAY)


@pytest.mark.unit
def test_parse_birth_date_range_edges():
    """Test that 1900 and the current year are both accepted."""
    assert parse_birth_date("1900/01/01", TODAY).year == 1900
    assert parse_birth_date("2024/03/31", TODAY).year == 2024


@pytest.mark.unit
def test_education_statuses(required_fields):
    """Test dated and undated education statuses."""
    form = dict(
        required_fields,
        education=[
            {
                "id": "e1",
                "schoolName": "東京大学",
                "entryYear": 2014,
                "entryMonth": 4,
                "status": "graduated",
                "completionYear": 2018,
                "completionMonth": 3,
            },
            {
                "id": "e2",
                "schoolName": "東京大学大学院",
                "entryYear": 2018,
                "entryMonth": 4,
                "status": "enrolled",
                "completionYear": 2020,
                "completionMonth": 3,
            },
        ],
    )

    graduated, enrolled = resume_snapshot_from_dict(form, TODAY).education

    assert graduated.status == Graduated(YearMonth(2018, 3))
    assert graduated.entered_at == YearMonth(2014, 4)
    assert enrolled.status == Enrolled()


@pytest.mark.unit
def test_employed_ignores_leftover_exit_fields(required_fields):
    """Test that exit fields on an employed entry never reach the rows."""
    form = dict(
        required_fields,
        workHistory=[
            {
                "id": "w1",
                "companyName": "株式会社サンプル",
                "entryYear": 2018,
                "entryMonth": 4,
                "status": "employed",
                "exitYear": 2020,
                "exitMonth": 3,
            }
        ],
    )

    snapshot = resume_snapshot_from_dict(form, TODAY)
    (entry,) = snapshot.work_history
    rows = build_work_history_rows(snapshot.work_history)

    assert entry.status == Employed()
    assert rows[-1].label == "株式会社サンプル 在職中"
    assert (rows[-1].year_label, rows[-1].month_label) == ("", "")


@pytest.mark.unit
def test_inconsistent_entries_are_dropped(required_fields):
    """Test that entries violating status/date rules are left out, others kept."""
    form = dict(
        required_fields,
        education=[
            {"id": "e1", "schoolName": "卒業日なし大学", "entryYear": 2014, "entryMonth": 4, "status": "graduated"},
            {"id": "e2", "schoolName": "", "entryYear": 2014, "entryMonth": 4, "status": "enrolled"},
            {"id": "e3", "schoolName": "月不正大学", "entryYear": 2014, "entryMonth": 13, "status": "enrolled"},
            {"id": "e4", "schoolName": "北高校", "entryYear": 2011, "entryMonth": 4, "status": "enrolled"},
        ],
        workHistory=[
            {"id": "w1", "companyName": "退社日なし株式会社", "entryYear": 2018, "entryMonth": 4, "status": "resigned"},
            {
                "id": "w2",
                "companyName": "株式会社テスト",
                "entryYear": 2015,
                "entryMonth": 4,
                "status": "resigned",
                "exitYear": 2018,
                "exitMonth": 3,
            },
        ],
    )

    snapshot = resume_snapshot_from_dict(form, TODAY)

    assert [entry.id for entry in snapshot.education] == ["e4"]
    assert [entry.id for entry in snapshot.work_history] == ["w2"]
    assert snapshot.work_history[0].status == Resigned(YearMonth(2018, 3))


@pytest.mark.unit
def test_qualification_with_half_date_is_dropped(required_fields):
    """Test that a qualification with only a year or only a month is left out."""
    form = dict(
        required_fields,
        qualifications=[
            {"id": "q1", "name": "TOEIC 850点", "year": 2019},
            {"id": "q2", "name": "簿記2級", "month": 6},
            {"id": "q3", "name": "普通自動車第一種運転免許", "year": 2014, "month": 8},
            {"id": "q4", "name": "日付未入力の資格"},
        ],
    )

    snapshot = resume_snapshot_from_dict(form, TODAY)

    assert [entry.id for entry in snapshot.qualifications] == ["q3", "q4"]
    assert snapshot.qualifications[0].obtained_at == YearMonth(2014, 8)
    assert snapshot.qualifications[1].obtained_at is None


@pytest.mark.unit
def test_entry_without_entry_date_is_kept(required_fields):
    """Test that a missing entry date is not an error at intake."""
    form = dict(required_fields, education=[{"id": "e1", "schoolName": "入力中高校", "status": "enrolled"}])

    (entry,) = resume_snapshot_from_dict(form, TODAY).education

    assert entry.entered_at is None


@pytest.mark.unit
def test_history_arrays_must_be_lists(required_fields):
    """Test that a non-list history field fails the snapshot."""
    form = dict(required_fields, education={"schoolName": "東京大学"})

    with pytest.raises(InvalidSnapshotError):
        resume_snapshot_from_dict(form, TODAY)


@pytest.mark.unit
def test_career_snapshot(required_fields):
    """Test career history entries and skills."""
    form = dict(
        required_fields,
        summary="Webエンジニアとして6年間従事。",
        careerHistory=[
            {
                "id": "c1",
                "companyName": "株式会社サンプル",
                "startYear": 2018,
                "startMonth": 4,
                "employmentType": "fullTime",
                "department": "開発部",
                "jobDescription": "設計・開発",
            },
            {"id": "c2", "companyName": "雇用形態不明株式会社", "employmentType": "freelance"},
        ],
        skills=[
            {"id": "s1", "category": "言語", "skillName": "Python", "experience": "6年"},
            {"id": "s2", "skillName": ""},
        ],
    )

    snapshot = career_snapshot_from_dict(form, TODAY)

    (entry,) = snapshot.career_history
    assert entry.employment_type is EmploymentType.FULL_TIME
    assert entry.started_at == YearMonth(2018, 4)
    assert entry.ended_at is None
    assert [skill.skill_name for skill in snapshot.skills] == ["Python"]


@pytest.mark.unit
def test_load_yaml_and_json_files(tmp_path, required_fields):
    """Test that YAML and JSON form files load into the same snapshot."""
    yaml_file = tmp_path / "form.yaml"
    yaml_file.write_text(
        "name: 山田 太郎\nfurigana: やまだ たろう\nbirthDate: '1995/04/02'\ngender: male\n"
        "postalCode: '100-0001'\nselfPR: 粘り強さが強みです。\n",
        encoding="utf-8",
    )
    json_file = tmp_path / "form.json"
    json_file.write_text(
        json.dumps(dict(required_fields, postalCode="100-0001", selfPR="粘り強さが強みです。"), ensure_ascii=False),
        encoding="utf-8",
    )

    from_yaml = load_resume_snapshot(yaml_file, TODAY)
    from_json = load_resume_snapshot(json_file, TODAY)

    assert from_yaml == from_json
    assert from_yaml.self_pr == "粘り強さが強みです。"
    assert from_yaml.profile.postal_code == "100-0001"
    assert load_career_snapshot(json_file, TODAY).profile.name == "山田 太郎"


@pytest.mark.unit
def test_load_form_data_errors(tmp_path):
    """Test missing files and non-mapping content."""
    with pytest.raises(FileNotFoundError):
        load_form_data(tmp_path / "missing.yaml")

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidSnapshotError):
        load_form_data(listing)
