"""Tests for BooleanSchema."""

from dataknobs_schema import BooleanSchema, boolean


class TestBooleanSchema:
    """Test is_true and is_false constraints."""

    def test_empty_schema_accepts_both(self):
        """Test that an unconstrained schema accepts True and False."""
        assert boolean().validate(True).get_value() is True
        assert boolean().validate(False).get_value() is False

    def test_null_fails(self):
        """Test that None fails with NULL_VALUE."""
        result = boolean().is_true().validate(None)
        assert result.is_failure()
        assert [e.code for e in result.get_errors()] == ["NULL_VALUE"]

    def test_is_true(self):
        """Test requiring True."""
        schema = boolean().is_true()
        assert schema.validate(True).is_success()
        result = schema.validate(False)
        assert result.is_failure()
        assert result.get_errors()[0].code == "NOT_TRUE"
        assert result.get_errors()[0].message == "Value must be true"

    def test_is_false(self):
        """Test requiring False."""
        schema = boolean().is_false()
        assert schema.validate(False).is_success()
        result = schema.validate(True)
        assert result.get_errors()[0].code == "NOT_FALSE"
        assert result.get_errors()[0].message == "Value must be false"

    def test_contradictory_constraints_report_one_error_each(self):
        """Test that is_true and is_false together always fail once."""
        schema = boolean().is_true().is_false()
        assert [e.code for e in schema.validate(True).get_errors()] == ["NOT_FALSE"]
        assert [e.code for e in schema.validate(False).get_errors()] == ["NOT_TRUE"]

    def test_chaining_keeps_type(self):
        """Test that builder calls return the schema itself."""
        schema = boolean()
        assert schema.is_true() is schema
        assert isinstance(schema, BooleanSchema)

    def test_composes_with_map(self):
        """Test mapping a validated boolean."""
        result = boolean().is_true().validate(True).map(lambda accepted: "yes" if accepted else "no")
        assert result.get_value() == "yes"
