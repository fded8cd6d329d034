"""Tests for Teams people icon components (cards/elements/people.py)."""

from types import SimpleNamespace

import pytest

from cards.elements import InvalidShape, user_icon, user_icon_set


class TestUserIcon:
    def test_single_user(self):
        icon = user_icon({"id": "aad-1", "name": "Jane Doe", "email": "jane@contoso.com"})
        assert icon == {
            "type": "Component",
            "name": "graph.microsoft.com/user",
            "view": "compact",
            "properties": {
                "id": "aad-1",
                "displayName": "Jane Doe",
                "userPrincipalName": "jane@contoso.com",
            },
        }

    def test_missing_fields_pass_through(self):
        icon = user_icon({"name": "No Id"})
        assert icon["properties"] == {"id": None, "displayName": "No Id", "userPrincipalName": None}

    def test_attribute_object(self):
        user = SimpleNamespace(id="aad-2", name="Bob", email="bob@contoso.com")
        assert user_icon(user)["properties"]["userPrincipalName"] == "bob@contoso.com"

    def test_extra_fields_ignored(self):
        icon = user_icon({"id": "1", "name": "A", "email": "a@x.com", "title": "CTO"})
        assert "title" not in icon["properties"]

    def test_object_without_identity_attributes(self):
        icon = user_icon(SimpleNamespace(title="CTO"))
        assert icon["properties"] == {"id": None, "displayName": None, "userPrincipalName": None}

    @pytest.mark.parametrize("user", [None, "jane@contoso.com", 42])
    def test_wrong_kind(self, user):
        with pytest.raises(InvalidShape):
            user_icon(user)


class TestUserIconSet:
    def test_order_preserved(self):
        icon = user_icon_set(
            [
                {"id": "1", "name": "A", "email": "a@x.com"},
                {"id": "2", "name": "B", "email": "b@x.com"},
            ]
        )
        assert icon["type"] == "Component"
        assert icon["name"] == "graph.microsoft.com/users"
        assert icon["view"] == "compact"
        assert icon["properties"]["users"] == [
            {"id": "1", "displayName": "A", "userPrincipalName": "a@x.com"},
            {"id": "2", "displayName": "B", "userPrincipalName": "b@x.com"},
        ]

    def test_duplicates_kept(self):
        user = {"id": "1", "name": "A", "email": "a@x.com"}
        assert len(user_icon_set([user, user])["properties"]["users"]) == 2

    def test_empty(self):
        assert user_icon_set([])["properties"] == {"users": []}

    def test_generator_input(self):
        users = ({"id": str(i), "name": n, "email": None} for i, n in enumerate("XYZ"))
        names = [u["displayName"] for u in user_icon_set(users)["properties"]["users"]]
        assert names == ["X", "Y", "Z"]

    @pytest.mark.parametrize("users", [None, "a@x.com", {"id": "1"}])
    def test_not_a_sequence(self, users):
        with pytest.raises(InvalidShape) as exc_info:
            user_icon_set(users)
        assert exc_info.value.field == "users"
