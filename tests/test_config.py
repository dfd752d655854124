"""
Tests for WalkConfig and its parts.
"""

from steptree import WalkConfig, DepthConfig, FilterConfig, TreeFormat


class TestDepthConfig:

    def test_unbounded(self):
        depth = DepthConfig()
        assert depth.should_yield(0)
        assert depth.should_yield(100)
        assert depth.should_explore(100)

    def test_bounds(self):
        depth = DepthConfig(min_depth=1, max_depth=2)
        assert not depth.should_yield(0)
        assert depth.should_yield(1)
        assert depth.should_yield(2)
        assert not depth.should_yield(3)
        assert depth.should_explore(1)
        assert not depth.should_explore(2)


class TestFilterConfig:

    def test_default_matches_everything(self):
        assert FilterConfig().matches("anything")

    def test_exclude_takes_precedence(self):
        config = FilterConfig(include_filter=lambda e: True, exclude_filter=lambda e: e == "x")
        assert not config.matches("x")
        assert config.matches("y")

    def test_include_filter_alone(self):
        config = FilterConfig(include_filter=lambda e: e.startswith("a"))
        assert config.matches("abc")
        assert not config.matches("xyz")

    def test_prunes_by_default(self):
        assert FilterConfig().prune_on_exclude


class TestWalkConfig:

    def test_valid(self):
        assert WalkConfig().validate() == []
        assert WalkConfig.shallow().validate() == []
        assert WalkConfig.unlimited().depth.max_depth is None

    def test_shallow(self):
        assert WalkConfig.shallow(3).depth.max_depth == 3

    def test_validation_errors(self):
        config = WalkConfig(depth=DepthConfig(min_depth=-1, max_depth=-2), max_elements=0)
        errors = config.validate()
        assert "min_depth cannot be negative" in errors
        assert "max_depth cannot be negative" in errors
        assert "max_depth cannot be less than min_depth" in errors
        assert "max_elements must be positive" in errors


class TestTreeFormat:

    def test_defaults(self):
        tree_format = TreeFormat()
        assert tree_format.branch == "├── "
        assert tree_format.formatter(3) == "3"

    def test_ascii(self):
        assert TreeFormat.ascii().last_branch == "`-- "
