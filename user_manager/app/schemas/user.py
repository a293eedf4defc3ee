"""
Pydantic models for the user management screen.

The remote API owns the user records; the screen keeps them as plain
dictionaries and only projects them into :class:`UserRow` objects for
display.  Fields are read optimistically: a missing or malformed field
falls back to a placeholder instead of failing validation.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

NOT_AVAILABLE = "N/A"

UserId = Union[int, str]


def split_full_name(name: Any) -> Tuple[Optional[str], Optional[str]]:
    """Split a full name on single spaces into ``(first, last)``.

    ``last`` is ``None`` when the name holds no space; ``first`` is
    ``None`` when the name is missing.  Only the first two tokens are
    used, so ``"Mary Ann Smith"`` yields ``("Mary", "Ann")``.
    """
    if not isinstance(name, str):
        return None, None
    parts = name.split(" ")
    last = parts[1] if " " in name else None
    return parts[0], last


def company_name(record: Dict[str, Any]) -> Optional[str]:
    company = record.get("company")
    if isinstance(company, dict):
        value = company.get("name")
        return str(value) if value else None
    return None


class NewUserDraft(BaseModel):
    """Locally edited form for a new user.  Cleared after a successful add."""

    first_name: str = Field("", examples=["Leanne"])
    last_name: str = Field("", examples=["Graham"])
    email: str = Field("", examples=["leanne@april.biz"])
    department: str = Field("", examples=["Romaguera-Crona"])

    def is_complete(self) -> bool:
        """True when every field holds some text (whitespace counts)."""
        return all((self.first_name, self.last_name, self.email, self.department))

    def to_payload(self) -> Dict[str, str]:
        """Body sent with ``POST /users``."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "department": self.department,
        }

    def to_record(self, user_id: UserId) -> Dict[str, Any]:
        """Build the record appended locally once the create call succeeds.

        The mock API does not persist writes, so the shape mirrors what
        ``GET /users`` returns rather than the server's echo.
        """
        return {
            "id": user_id,
            "name": f"{self.first_name} {self.last_name}",
            "email": self.email,
            "company": {"name": self.department},
        }


class DraftUpdate(BaseModel):
    """Partial update of the draft; omitted fields keep their value."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None


class SearchRequest(BaseModel):
    query: str = Field("", examples=["3"], description="User identifier; empty lists everyone")


class UserRow(BaseModel):
    """Display projection of a remote user record."""

    id: Any = None
    first_name: str
    last_name: str
    email: str
    department: str
    editing: bool = False

    @classmethod
    def from_record(
        cls,
        record: Dict[str, Any],
        *,
        editing: bool = False,
        placeholder: str = NOT_AVAILABLE,
    ) -> "UserRow":
        first, last = split_full_name(record.get("name"))
        email = record.get("email")
        return cls(
            id=record.get("id"),
            first_name=first or placeholder,
            # An empty second token (double space) is shown as-is.
            last_name=last if last is not None else placeholder,
            email="" if email is None else str(email),
            department=company_name(record) or placeholder,
            editing=editing,
        )

    @classmethod
    def edit_defaults(cls, record: Dict[str, Any]) -> "UserRow":
        """Initial values of the inputs shown for the row in edit mode."""
        return cls.from_record(record, editing=True, placeholder="")


class ViewState(BaseModel):
    """Everything the screen shows at one point in time."""

    users: List[Dict[str, Any]] = Field(default_factory=list)
    rows: List[UserRow] = Field(default_factory=list)
    search_query: str = ""
    editing_user_id: Optional[UserId] = None
    draft: NewUserDraft = Field(default_factory=NewUserDraft)
    error: Optional[str] = None
