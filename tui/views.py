"""
Spy Cat Agency console.
Display formatting for the spy cat screen - kept free of Textual so it can be tested directly.
"""

from typing import List, Optional, Tuple

from spycats.api.schemas import SpyCat

TITLE = "🐈‍⬛ Spy Cat Agency"
SUBTITLE = "Manage your elite spy cats"
LOADING_MESSAGE = "Loading spy cats..."
FORM_TITLE = "Add New Spy Cat"
EMPTY_LIST_MESSAGE = "No spy cats yet."
TABLE_COLUMNS = ("ID", "Name", "Experience", "Breed", "Salary")

# (field, label, placeholder)
FORM_FIELDS = [
    ("name", "Name", "Agent Whiskers"),
    ("years_of_experience", "Years of Experience", "5"),
    ("breed", "Breed", "Persian"),
    ("salary", "Salary ($)", "50000"),
]


def format_salary(salary: float) -> str:
    """$50,000 / $1,234.5 - grouped thousands, at most three decimals."""
    text = f"{salary:,.3f}".rstrip("0").rstrip(".")
    return f"${text}"


def format_experience(years: int) -> str:
    return f"{years} years"


def list_heading(count: int) -> str:
    return f"Active Spy Cats ({count})"


def submit_label(submitting: bool) -> str:
    return "Adding..." if submitting else "Add Spy Cat"


def list_placeholder(cats: List[SpyCat]) -> Optional[str]:
    """Text shown instead of the table, or None when there are rows."""
    if not cats:
        return EMPTY_LIST_MESSAGE
    return None


def cat_row(cat: SpyCat, editing_id: Optional[int] = None) -> Tuple[str, str, str, str, str]:
    salary = format_salary(cat.salary)
    if cat.id == editing_id:
        salary = f"✎ {salary}"
    return (
        str(cat.id),
        cat.name,
        format_experience(cat.years_of_experience),
        cat.breed,
        salary,
    )


def edit_label(cat: Optional[SpyCat]) -> str:
    if cat is None:
        return "New salary:"
    return f"New salary for {cat.name}:"
