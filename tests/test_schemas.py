"""Tests for the display projection and the new-user draft."""

import pytest

from user_manager.app.schemas.user import NewUserDraft, UserRow, split_full_name


class TestSplitFullName:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Leanne Graham", ("Leanne", "Graham")),
            ("Mary Ann Smith", ("Mary", "Ann")),
            ("Clementine", ("Clementine", None)),
            ("Double  Space", ("Double", "")),
            (None, (None, None)),
            (42, (None, None)),
        ],
    )
    def test_split(self, name, expected):
        assert split_full_name(name) == expected


class TestUserRow:
    def test_full_record(self):
        row = UserRow.from_record(
            {"id": 1, "name": "Leanne Graham", "email": "a@b.c", "company": {"name": "Acme"}}
        )
        assert (row.first_name, row.last_name, row.email, row.department) == (
            "Leanne",
            "Graham",
            "a@b.c",
            "Acme",
        )

    def test_missing_fields_fall_back(self):
        row = UserRow.from_record({"id": 5})
        assert row.first_name == "N/A"
        assert row.last_name == "N/A"
        assert row.email == ""
        assert row.department == "N/A"

    def test_leading_space_hides_first_name(self):
        row = UserRow.from_record({"id": 5, "name": " Smith"})
        assert row.first_name == "N/A"
        assert row.last_name == "Smith"

    def test_company_not_an_object(self):
        row = UserRow.from_record({"id": 5, "company": "Acme"})
        assert row.department == "N/A"

    def test_edit_defaults_use_empty_strings(self):
        row = UserRow.edit_defaults({"id": 3, "name": "Clementine", "email": "c@d.e"})
        assert row.editing is True
        assert row.first_name == "Clementine"
        assert row.last_name == ""
        assert row.department == ""


class TestNewUserDraft:
    def test_incomplete_by_default(self):
        assert NewUserDraft().is_complete() is False

    def test_complete(self):
        draft = NewUserDraft(first_name="A", last_name="B", email="c", department="D")
        assert draft.is_complete() is True

    def test_payload_uses_wire_keys(self):
        draft = NewUserDraft(first_name="A", last_name="B", email="c", department="D")
        assert draft.to_payload() == {"firstName": "A", "lastName": "B", "email": "c", "department": "D"}

    def test_record_shape(self):
        draft = NewUserDraft(first_name="A", last_name="B", email="c", department="D")
        assert draft.to_record(7) == {"id": 7, "name": "A B", "email": "c", "company": {"name": "D"}}
