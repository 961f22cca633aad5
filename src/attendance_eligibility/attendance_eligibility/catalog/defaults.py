"""Default HNDIT first-year catalog and timetable."""

from __future__ import annotations

from .model import Catalog, Subject

DEFAULT_SUBJECTS = (
    Subject("HNDIT 1012", "Visual Application Programming", "Mr. J. R. Jayasinghe", "lect1012"),
    Subject("HNDIT 1022", "Web Design", "Ms. H. A. P. Anusha", "lect1022"),
    Subject("HNDIT 1032", "Computer Network Systems", "Ms. S. M. M. Malika", "lect1032"),
    Subject("HNDIT 1042", "Information Management Systems", "Mr. Kannangara", "lect1042"),
    Subject("HNDIT 1062", "Communication Skills", "Ms. Renuka", "lect1062"),
)

# Monday..Friday
DEFAULT_TIMETABLE = {
    0: "HNDIT 1022",
    1: "HNDIT 1012",
    2: "HNDIT 1032",
    3: "HNDIT 1042",
    4: "HNDIT 1062",
}


def default_catalog() -> Catalog:
    return Catalog(subjects=DEFAULT_SUBJECTS, timetable=DEFAULT_TIMETABLE)
