"""
Tests for the CQL field and operator tables.
"""
import pytest  # type: ignore

from confluence_client.exceptions import InvariantViolationError
from confluence_client.query import operators
from confluence_client.query.fields import ContentType, Field
from confluence_client.query.operators import Operator


class TestOperator:
    """Operator tokens and the inverse table."""

    @pytest.mark.parametrize("operator", list(Operator))
    def test_inverse_is_an_involution(self, operator):
        assert operator.inverse.inverse is operator

    @pytest.mark.parametrize("operator", list(Operator))
    def test_no_operator_is_its_own_inverse(self, operator):
        assert operator.inverse is not operator

    @pytest.mark.parametrize(
        "operator,inverse",
        [
            (Operator.EQUAL_TO, Operator.NOT_EQUAL_TO),
            (Operator.CONTAINS, Operator.DOES_NOT_CONTAIN),
            (Operator.IN, Operator.NOT_IN),
            (Operator.GREATER_THAN, Operator.LESS_THAN),
            (Operator.GREATER_THAN_EQUAL_TO, Operator.LESS_THAN_EQUAL_TO),
        ],
    )
    def test_inverse_pairs(self, operator, inverse):
        assert operator.inverse is inverse
        assert inverse.inverse is operator

    def test_tokens(self):
        tokens = {operator.token for operator in Operator}
        assert tokens == {"=", "!=", "~", "!~", "in", "not in", ">", ">=", "<", "<="}

    def test_missing_inverse_is_an_invariant_violation(self, monkeypatch):
        monkeypatch.delitem(operators._INVERSES, Operator.IN)

        with pytest.raises(InvariantViolationError):
            Operator.IN.inverse


class TestField:
    """Field tokens."""

    @pytest.mark.parametrize(
        "field,token",
        [
            (Field.CREATOR, "creator"),
            (Field.CONTRIBUTOR, "contributor"),
            (Field.TYPE, "type"),
            (Field.TITLE, "title"),
            (Field.TEXT, "text"),
            (Field.SPACE, "space"),
            (Field.CREATED, "created"),
            (Field.LAST_MODIFIED, "lastmodified"),
            (Field.LABEL, "label"),
        ],
    )
    def test_tokens(self, field, token):
        assert field.token == token
        assert str(field) == token

    def test_tokens_are_unique(self):
        assert len({field.token for field in Field}) == len(Field)

    def test_only_label_is_multi_valued(self):
        assert [field for field in Field if field.is_multi_valued] == [Field.LABEL]

    def test_content_type_tokens(self):
        assert ContentType.BLOG_POST.value == "blogpost"
        assert str(ContentType.PAGE) == "page"
