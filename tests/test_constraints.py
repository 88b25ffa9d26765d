"""Tests for the constraint and transform pipeline primitives."""

from dataknobs_schema import Constraint, ConstraintList, TransformPipeline, ValidationError


class TestConstraint:
    """Test single constraints."""

    def test_test_and_error(self):
        """Test evaluating a constraint and building its error."""
        constraint = Constraint(lambda v: v > 0, "Value must be positive", "NOT_POSITIVE")
        assert constraint.test(1)
        assert not constraint.test(0)
        assert constraint.to_error() == ValidationError("", "Value must be positive", "NOT_POSITIVE")

    def test_truthy_predicate_result(self):
        """Test that predicate results are treated as booleans."""
        constraint = Constraint(lambda v: v, "Must be non-empty", "EMPTY")
        assert constraint.test("x")
        assert not constraint.test("")


class TestConstraintList:
    """Test ordered evaluation without short-circuiting."""

    def test_empty_list_never_fails(self):
        """Test that no constraints means no errors."""
        assert ConstraintList().evaluate("anything") == []

    def test_every_failure_is_reported_in_order(self):
        """Test that evaluation continues past failures."""
        seen = []

        def predicate(name, ok):
            def run(value):
                seen.append(name)
                return ok
            return run

        constraints = ConstraintList()
        constraints.add(Constraint(predicate("a", False), "a failed", "A"))
        constraints.add(Constraint(predicate("b", True), "b failed", "B"))
        constraints.add(Constraint(predicate("c", False), "c failed", "C"))

        errors = constraints.evaluate(1)
        assert [e.code for e in errors] == ["A", "C"]
        assert all(e.path == "" for e in errors)
        assert seen == ["a", "b", "c"]

    def test_duplicates_are_kept(self):
        """Test that identical constraints each report."""
        constraints = ConstraintList()
        for _ in range(2):
            constraints.add(Constraint(lambda v: False, "nope", "NOPE"))
        assert len(constraints) == 2
        assert [e.code for e in constraints.evaluate(None)] == ["NOPE", "NOPE"]

    def test_iteration_order(self):
        """Test iterating over constraints in declaration order."""
        constraints = ConstraintList()
        constraints.add(Constraint(bool, "first", "FIRST"))
        constraints.add(Constraint(bool, "second", "SECOND"))
        assert [c.code for c in constraints] == ["FIRST", "SECOND"]


class TestTransformPipeline:
    """Test ordered value rewrites."""

    def test_empty_pipeline_is_identity(self):
        """Test that no transforms leaves the value alone."""
        value = object()
        assert TransformPipeline().apply(value) is value

    def test_applies_in_order(self):
        """Test that transforms are folded in declaration order."""
        pipeline = TransformPipeline()
        pipeline.add(lambda s: s + "a")
        pipeline.add(lambda s: s + "b")
        pipeline.add(str.upper)
        assert pipeline.apply("x") == "XAB"
        assert len(pipeline) == 3
