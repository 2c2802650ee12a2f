import pytest

from dirtree.filters.matcher import compile_glob, glob_match, match


class TestPlainPatterns:
    @pytest.mark.parametrize(
        "path",
        ["build", "src/build", "build/out.bin", "a/build/b/c"],
    )
    def test_bare_name_matches_any_position(self, path):
        assert match(path, "build", False)

    def test_glob_against_whole_path(self):
        assert match("main.go", "*.go")
        assert match("src/main.go", "src/*.go")

    def test_star_does_not_cross_separator(self):
        assert not match("src/main.go", "*.go")

    def test_question_mark(self):
        assert match("a1", "a?")
        assert not match("x/y", "x?y")

    def test_suffix_is_literal(self):
        # Suffix rule is plain string comparison, not segment aware
        assert match("mybuild", "build")

    def test_unrelated_path(self):
        assert not match("src/main.go", "build")

    def test_is_dir_does_not_change_result(self):
        for path in ["build", "src/build.txt", "docs/index.md"]:
            assert match(path, "build", True) == match(path, "build", False)


class TestGlob:
    def test_character_class(self):
        assert glob_match("file[0-9]", "file1")
        assert not glob_match("file[0-9]", "fileA")

    @pytest.mark.parametrize("pattern", ["file[!0-9]", "file[^0-9]"])
    def test_negated_class(self, pattern):
        assert glob_match(pattern, "fileA")
        assert not glob_match(pattern, "file7")

    def test_class_never_matches_separator(self):
        assert not glob_match("a[!x]b", "a/b")

    def test_escape(self):
        assert glob_match(r"a\*b", "a*b")
        assert not glob_match(r"a\*b", "axb")

    @pytest.mark.parametrize("pattern", ["a[", "a[]", "a\\", "[z-a]"])
    def test_malformed_pattern_never_globs(self, pattern):
        assert compile_glob(pattern) is None
        assert not glob_match(pattern, pattern)

    def test_malformed_pattern_still_matches_by_suffix(self):
        assert match("xa[b", "a[b")

    def test_regex_metacharacters_are_literal(self):
        assert glob_match("a+b.(c)", "a+b.(c)")
        assert not glob_match("a.b", "axb")


class TestRecursiveWildcard:
    def test_zero_segments(self):
        assert match("a/b", "a/**/b")

    def test_many_segments(self):
        assert match("a/x/y/b", "a/**/b")

    def test_non_match(self):
        assert not match("a/x/c", "a/**/b")

    def test_path_must_be_consumed(self):
        assert not match("a/b/c", "a/**/b")

    def test_leading_wildcard(self):
        assert match("build", "**/build")
        assert match("src/lib/build", "**/build")

    def test_trailing_wildcard_matches_exhausted_path(self):
        assert match("logs", "logs/**")
        assert match("logs/2024/app.log", "logs/**")

    def test_segments_use_glob(self):
        assert match("x/y/z.log", "**/*.log")
        assert not match("x/y/z.txt", "**/*.log")

    def test_no_suffix_fallback(self):
        # Only the segment matcher applies once ** is present
        assert not match("a/b/c", "b/**")

    def test_embedded_double_star_acts_like_star(self):
        assert match("foobar", "foo**")
        assert not match("foo/bar", "foo**")

    def test_many_wildcards_stay_fast(self):
        pattern = "/".join(["**"] * 25 + ["z"])
        path = "/".join(["a"] * 60)
        assert not match(path, pattern)
        assert match(path + "/z", pattern)
