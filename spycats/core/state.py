"""
Spy Cat Agency console.
View state controller - owns the cat list, the create form and the inline salary edit.
"""

import math
import re
from dataclasses import dataclass, fields
from typing import Callable, List, Optional

from util.logging import logger
from ..api.client import SpyCatsClient, SpyCatsClientError, ApiError
from ..api.schemas import SpyCat, SpyCatCreateRequest
from .errors import get_api_error_message

LOAD_ERROR = "Failed to load spy cats. Please try again."
FORM_INVALID_ERROR = "Please fill all fields correctly."
SALARY_ERROR = "Salary must be greater than 0"
CREATE_FALLBACK_ERROR = "Failed to add spy cat. Please check the breed name."
UPDATE_FALLBACK_ERROR = "Failed to update salary."
DELETE_ERROR = "Failed to delete spy cat. They might have an active mission."
DELETE_PROMPT = "Are you sure you want to remove this spy cat?"

_INT_PREFIX = re.compile(r'\s*([+-]?\d+)')
_FLOAT_PREFIX = re.compile(r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))')


def parse_int(text: str) -> Optional[int]:
    """Parse the leading integer of text, or None when there is none."""
    match = _INT_PREFIX.match(text or "")
    if not match:
        return None
    return int(match.group(1))


def parse_number(text: str) -> Optional[float]:
    """Parse the leading decimal number of text, or None when there is none."""
    match = _FLOAT_PREFIX.match(text or "")
    if not match:
        return None
    return float(match.group(1).replace("Infinity", "inf"))


def format_number(value: float) -> str:
    """Render a number the way it was typed: 50000.0 -> '50000'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _failure_message(error: SpyCatsClientError, fallback: str) -> str:
    """Normalized backend message for a rejected request, else fallback."""
    if isinstance(error, ApiError) and error.payload is not None:
        return get_api_error_message(error.payload) or fallback
    return fallback


@dataclass
class CatDraft:
    """Unsaved form input; every field is raw text."""
    name: str = ""
    years_of_experience: str = ""
    breed: str = ""
    salary: str = ""

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, "")

    def is_invalid(self) -> bool:
        experience = parse_int(self.years_of_experience)
        salary = parse_number(self.salary)
        return (
            not self.name.strip()
            or not self.breed.strip()
            or experience is None
            or experience < 0
            or salary is None
            or not math.isfinite(salary)
            or salary <= 0
        )


class SpyCatsController:
    """
    State holder behind the spy cat screen.

    Every operation catches its own failures and stores them as display
    text in ``error`` (top-level banner) or ``form_error`` (create form);
    nothing is raised to the caller.
    """

    def __init__(self, client: SpyCatsClient):
        self.client = client
        self.cats: List[SpyCat] = []
        self.loading = True
        self.error = ""
        self.form = CatDraft()
        self.form_error = ""
        self.submitting = False
        self.editing_id: Optional[int] = None
        self.edit_salary = ""

    def find_cat(self, cat_id: Optional[int]) -> Optional[SpyCat]:
        return next((c for c in self.cats if c.id == cat_id), None)

    # List

    def load_cats(self) -> bool:
        """Fetch the full list, replacing local records."""
        try:
            self.error = ""
            self.cats = self.client.list_cats()
            logger.info(f"Loaded {len(self.cats)} spy cats")
            return True
        except SpyCatsClientError as e:
            logger.error(f"Failed to fetch cats: {e}")
            self.error = LOAD_ERROR
            return False
        finally:
            self.loading = False

    # Create form

    def update_form(self, field_name: str, value: str) -> None:
        if field_name not in {f.name for f in fields(CatDraft)}:
            raise KeyError(f"Unknown form field: {field_name}")
        setattr(self.form, field_name, value)

    @property
    def is_form_invalid(self) -> bool:
        return self.form.is_invalid()

    def _build_create_request(self) -> SpyCatCreateRequest:
        """
        Validate the draft and build the POST body.

        Raises:
            ValueError: with the form error to display
        """
        name = self.form.name.strip()
        breed = self.form.breed.strip()
        experience = parse_int(self.form.years_of_experience)
        salary = parse_number(self.form.salary)

        if not name or not breed or experience is None or experience < 0 or salary is None or not math.isfinite(salary):
            raise ValueError(FORM_INVALID_ERROR)
        if salary <= 0:
            raise ValueError(SALARY_ERROR)

        return SpyCatCreateRequest(
            name=name,
            years_of_experience=experience,
            breed=breed,
            salary=salary
        )

    def submit(self) -> bool:
        """Validate the draft and create a record from it."""
        self.form_error = ""
        self.submitting = True

        try:
            try:
                payload = self._build_create_request()
            except ValueError as e:
                self.form_error = str(e)
                return False

            try:
                cat = self.client.create_cat(payload)
            except SpyCatsClientError as e:
                logger.error(f"Create spy cat failed: {e}")
                self.form_error = _failure_message(e, CREATE_FALLBACK_ERROR)
                return False

            self.cats = self.cats + [cat]
            self.form.reset()
            logger.log_cat_change("created", cat.id, {"breed": cat.breed})
            return True
        finally:
            self.submitting = False

    # Inline salary edit

    def start_edit(self, cat_id: int) -> None:
        cat = self.find_cat(cat_id)
        self.editing_id = cat_id
        self.edit_salary = format_number(cat.salary) if cat else ""

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.edit_salary = ""

    @property
    def is_edit_invalid(self) -> bool:
        """True when Confirm must stay disabled."""
        parsed = parse_number(self.edit_salary)
        if self.edit_salary == "" or parsed is None or not math.isfinite(parsed) or parsed <= 0:
            return True
        current = self.find_cat(self.editing_id)
        return current is not None and parsed == current.salary

    def confirm_edit(self, cat_id: int) -> bool:
        """Send the draft salary for cat_id and apply the returned record."""
        self.error = ""
        new_salary = parse_number(self.edit_salary)
        if new_salary is None or not math.isfinite(new_salary) or new_salary <= 0:
            self.error = SALARY_ERROR
            return False

        current = self.find_cat(cat_id)
        if current is not None and new_salary == current.salary:
            return False

        try:
            updated = self.client.update_salary(cat_id, new_salary)
        except SpyCatsClientError as e:
            logger.error(f"Salary update for cat {cat_id} failed: {e}")
            self.error = _failure_message(e, UPDATE_FALLBACK_ERROR)
            return False

        self.cats = [updated if c.id == cat_id else c for c in self.cats]
        self.cancel_edit()
        logger.log_cat_change("salary_updated", cat_id, {"salary": updated.salary})
        return True

    # Delete

    def delete_cat(self, cat_id: int, confirm: Callable[[str], bool]) -> bool:
        """Ask confirm(prompt) and delete cat_id when it answers yes."""
        if not confirm(DELETE_PROMPT):
            return False

        try:
            self.client.delete_cat(cat_id)
        except SpyCatsClientError as e:
            logger.error(f"Failed to delete cat {cat_id}: {e}")
            self.error = DELETE_ERROR
            return False

        self.cats = [c for c in self.cats if c.id != cat_id]
        logger.log_cat_change("deleted", cat_id)
        return True
