from run_artifacts.selection.matching import match_any_name, match_any_pattern


def test_match_any_name_is_exact_and_case_sensitive():
    assert match_any_name(["build-linux", "docs"], "docs")
    assert not match_any_name(["docs"], "Docs")
    assert not match_any_name(["docs"], "docs ")
    assert not match_any_name([], "docs")


def test_match_any_pattern_uses_shell_glob_semantics():
    patterns = ["build-*"]

    assert match_any_pattern(patterns, "build-linux")
    assert match_any_pattern(patterns, "build-mac")
    assert not match_any_pattern(patterns, "test-linux")


def test_match_any_pattern_supports_single_char_and_classes():
    assert match_any_pattern(["log-?"], "log-1")
    assert not match_any_pattern(["log-?"], "log-12")
    assert match_any_pattern(["report-[ab]"], "report-b")
    assert not match_any_pattern(["report-[ab]"], "report-c")
    assert match_any_pattern(["report-[^ab]"], "report-c")


def test_match_any_pattern_is_case_sensitive():
    assert not match_any_pattern(["Build-*"], "build-linux")


def test_malformed_pattern_does_not_match_and_does_not_stop_evaluation():
    assert not match_any_pattern(["[abc"], "[abc")
    assert not match_any_pattern(["coverage-[0-9"], "coverage-1")
    assert match_any_pattern(["[abc", "cov*"], "coverage-1")


def test_match_any_pattern_without_patterns_is_false():
    assert not match_any_pattern([], "anything")


def test_wildcards_do_not_cross_path_separators():
    assert not match_any_pattern(["build-*"], "build-x/y")
    assert not match_any_pattern(["build-?y"], "build-/y")
    assert match_any_pattern(["build-*/*"], "build-x/y")


def test_backslash_makes_the_next_character_literal():
    assert match_any_pattern(["build-\\*"], "build-*")
    assert not match_any_pattern(["build-\\*"], "build-linux")
    assert match_any_pattern(["what\\?"], "what?")
    assert match_any_pattern(["[\\]]x"], "]x")


def test_trailing_backslash_is_malformed():
    assert not match_any_pattern(["build-\\"], "build-\\")
    assert match_any_pattern(["build-\\", "build-*"], "build-x")


def test_uncompilable_class_is_skipped():
    assert not match_any_pattern(["[z-a]"], "m")
    assert match_any_pattern(["[z-a]", "m"], "m")


def test_empty_or_dangling_class_is_malformed():
    assert not match_any_pattern(["[]"], "[]")
    assert not match_any_pattern(["[a-]"], "a")
