"""
Tests for the Naming Normalizer
"""

import pytest

from structmeta.ast.models import NameForms
from structmeta.ast.naming import (
    camel_identifier,
    derive_names,
    lower_camel,
    lower_initial,
    plural,
    short_name,
    singular,
    snake,
    split_words,
)


class TestPluralization:
    """Test singular/plural inflection and its override."""

    def test_regular_plural(self):
        assert plural("Dog") == "Dogs"
        assert plural("Category") == "Categories"

    def test_information_override(self):
        assert plural("information") == "informations"
        assert plural("Information") == "Informations"

    def test_irregular_plural(self):
        assert plural("Person") == "People"

    def test_singular(self):
        assert singular("Users") == "User"
        assert singular("Categories") == "Category"
        assert singular("User") == "User"

    def test_empty(self):
        assert plural("") == ""
        assert singular("") == ""


class TestCasing:
    """Test camel, lower camel and snake spellings."""

    def test_split_words(self):
        assert split_words("UserAccountSetting") == ["User", "Account", "Setting"]
        assert split_words("HTTPServer") == ["HTTP", "Server"]
        assert split_words("user_id") == ["user", "id"]
        assert split_words("UserIDs") == ["User", "IDs"]

    def test_split_words_non_ascii(self):
        assert split_words("Über") == ["Über"]
        assert split_words("CaféÄrger") == ["Café", "Ärger"]
        assert split_words("ÖlID") == ["Öl", "ID"]

    def test_camel_identifier_initialisms(self):
        assert camel_identifier("user_id") == "UserID"
        assert camel_identifier("UserId") == "UserID"
        assert camel_identifier("api_url") == "APIURL"
        assert camel_identifier("UserAccount") == "UserAccount"

    def test_camel_identifier_leading_digit(self):
        assert camel_identifier("2fa_code") == "_2FaCode"

    def test_lower_camel_softens_id(self):
        assert lower_camel("UserID") == "userId"
        assert lower_camel("ID") == "id"
        assert lower_camel("OwnerIDs") == "ownerIds"

    def test_lower_camel_acronym_prefix(self):
        assert lower_camel("HTTPServer") == "httpServer"
        assert lower_camel("URLPath") == "urlPath"

    def test_lower_initial(self):
        assert lower_initial("UserID") == "userID"
        assert lower_initial("X") == "x"

    def test_snake(self):
        assert snake("UserID") == "user_id"
        assert snake("UserAccountSetting") == "user_account_setting"
        assert snake("HTTPServer") == "http_server"

    def test_short_name(self):
        assert short_name("UserAccount") == "ua"
        assert short_name("UserAccountSetting") == "uas"
        assert short_name("user") == ""


class TestDeriveNames:
    """Test the full set of derived spellings."""

    def test_type_names_are_singularized(self):
        names = derive_names("UserAccountSettings", singularize=True)
        assert names.singular == "UserAccountSetting"
        assert names.plural == "UserAccountSettings"
        assert names.camel == "UserAccountSetting"
        assert names.camel_plural == "UserAccountSettings"
        assert names.short == "uas"
        assert names.lower_camel == "userAccountSettings"
        assert names.lower_camel_plural == "userAccountSettings"
        assert names.snake == "user_account_settings"

    def test_member_names_keep_declared_form(self):
        names = derive_names("Items")
        assert names.singular == "Items"
        assert names.lower_camel == "items"
        assert names.lower_initial == "items"

    def test_information_type(self):
        names = derive_names("Information", singularize=True)
        assert names.singular == "Information"
        assert names.plural == "Informations"
        assert names.camel_plural == "Informations"
        assert names.lower_camel_plural == "informations"

    def test_id_member(self):
        names = derive_names("UserID")
        assert names.lower_camel == "userId"
        assert names.lower_initial == "userID"
        assert names.snake == "user_id"

    def test_non_ascii_identifier(self):
        names = derive_names("Über", singularize=True)
        assert names.camel == "Über"
        assert names.lower_camel == "über"
        assert names.snake == "über"
        assert names.short == "ü"

    @pytest.mark.parametrize("singularize", [True, False])
    def test_empty_identifier(self, singularize):
        assert derive_names("", singularize=singularize) == NameForms()

    def test_pure(self):
        assert derive_names("OrderItem", singularize=True) == derive_names("OrderItem", singularize=True)
