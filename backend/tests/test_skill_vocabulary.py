import json

import pytest

from services.errors import VocabularyConfigError
from services.skill_vocabulary import (
    DEFAULT_SKILLS,
    SkillEntry,
    SkillVocabulary,
    get_vocabulary,
    load_vocabulary,
    reset_vocabulary,
)


def test_default_vocabulary_builds():
    vocab = SkillVocabulary.from_mapping(DEFAULT_SKILLS)
    assert len(vocab) == len(DEFAULT_SKILLS)
    assert vocab.canonical_ids[:3] == ("rust", "c++", "c#")


def test_canonical_for_resolves_aliases_any_case(small_vocabulary):
    assert small_vocabulary.canonical_for("JS") == "javascript"
    assert small_vocabulary.canonical_for("javascript") == "javascript"
    assert small_vocabulary.canonical_for(" Postgres ") == "postgresql"
    assert small_vocabulary.canonical_for("cobol") is None


def test_contains_checks_canonical_ids(small_vocabulary):
    assert "javascript" in small_vocabulary
    assert "JavaScript" in small_vocabulary
    assert " Rust " in small_vocabulary
    assert "js" not in small_vocabulary
    assert "cobol" not in small_vocabulary
    assert 42 not in small_vocabulary


def test_canonical_ids_are_normalized():
    vocab = SkillVocabulary.from_mapping({"  Machine   Learning ": ["machine learning", "ML"]})
    assert vocab.canonical_ids == ("machine learning",)
    assert list(vocab)[0].patterns == ("machine learning", "ml")


def test_duplicate_canonical_rejected():
    with pytest.raises(VocabularyConfigError, match="Duplicate"):
        SkillVocabulary([SkillEntry("rust", ("rust",)), SkillEntry("Rust", ("rustlang",))])


def test_empty_pattern_list_rejected():
    with pytest.raises(VocabularyConfigError, match="no recognition patterns"):
        SkillVocabulary.from_mapping({"rust": []})


def test_blank_pattern_rejected():
    with pytest.raises(VocabularyConfigError, match="blank"):
        SkillVocabulary.from_mapping({"rust": ["rust", "  "]})


def test_alias_shared_by_two_skills_rejected():
    with pytest.raises(VocabularyConfigError, match="claimed by both"):
        SkillVocabulary.from_mapping({"javascript": ["js"], "node.js": ["node.js", "js"]})


def test_patterns_must_be_a_list():
    with pytest.raises(VocabularyConfigError, match="list of strings"):
        SkillVocabulary.from_mapping({"rust": "rust"})


def test_from_file_loads_json(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text(json.dumps({"rust": ["rust"], "golang": ["golang", "go lang"]}), encoding="utf-8")
    vocab = SkillVocabulary.from_file(path)
    assert vocab.canonical_ids == ("rust", "golang")
    assert vocab.canonical_for("Go Lang") == "golang"


def test_from_file_missing_is_config_error(tmp_path):
    with pytest.raises(VocabularyConfigError, match="Cannot read"):
        SkillVocabulary.from_file(tmp_path / "missing.json")


def test_from_file_bad_json_is_config_error(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(VocabularyConfigError, match="Invalid JSON"):
        SkillVocabulary.from_file(path)


def test_from_file_wrong_shape_is_config_error(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text(json.dumps(["rust", "docker"]), encoding="utf-8")
    with pytest.raises(VocabularyConfigError, match="mapping"):
        SkillVocabulary.from_file(path)


def test_load_vocabulary_without_path_uses_builtin():
    assert load_vocabulary("").canonical_ids == tuple(DEFAULT_SKILLS)


def test_get_vocabulary_is_shared_until_reset():
    reset_vocabulary()
    first = get_vocabulary()
    assert get_vocabulary() is first
    reset_vocabulary()
    assert get_vocabulary() is not first
