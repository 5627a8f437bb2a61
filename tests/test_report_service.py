from staffgap.services.report_service import gap_analysis_report, summary_report


def test_gap_analysis_report(portal):
    report = gap_analysis_report(
        portal.submissions.submissions,
        portal.directory.list_departments(),
        portal.policy.requirements,
        "2024-2025",
    )

    assert report.title == "Gap Analysis Report for 2024-2025"
    assert report.headers == ["Academic Rank", "Required (NUC)", "Actual Staff", "Gap"]
    assert len(report.rows) == 7
    assert report.rows[0] == ["Professor", 2, 4, 0]


def test_gap_analysis_report_scoped_to_faculty(portal):
    report = gap_analysis_report(
        portal.submissions.submissions,
        portal.directory.list_departments(),
        portal.policy.requirements,
        "2024-2025",
        faculty_id=1,
    )

    # only Economics (Lecturer I) and Political Science (Professor) are approved this year
    assert report.faculty_id == 1
    assert report.rows[0] == ["Professor", 2, 2, 0]
    assert report.rows[2] == ["Senior Lecturer", 4, 0, 4]


def test_summary_report_marks_missing_submissions(portal):
    report = summary_report(
        portal.submissions.submissions,
        portal.directory.list_departments(),
        portal.directory.list_faculties(),
        "2024-2025",
    )

    assert report.title == "University Staff Summary for 2024-2025"
    assert report.headers == ["Faculty", "Department", "Total Staff", "Status"]
    assert len(report.rows) == 15

    rows = {row[1]: row for row in report.rows}
    # Accounting's only submission is from last year
    assert rows["Accounting"] == ["Faculty of Management", "Accounting", 0, "Not Submitted"]
    assert rows["Sociology"][3] == "Not Submitted"
    assert rows["Computer Science"] == ["Faculty of Science", "Computer Science", 12, "Approved"]
    assert rows["Mass Communication"][3] == "Needs Correction"


def test_summary_report_skips_deleted_departments(portal):
    portal.directory.delete_department(202)
    report = summary_report(
        portal.submissions.submissions,
        portal.directory.departments,
        portal.directory.faculties,
        "2024-2025",
        faculty_id=2,
    )
    assert [row[1] for row in report.rows] == [
        "Computer Science", "Biochemistry", "Biology", "Chemistry", "Mathematics", "Statistics",
    ]
