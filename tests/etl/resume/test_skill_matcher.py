#!/usr/bin/env python3
"""
Tests for skill taxonomy matching.
"""
import pytest

from etl.resume.skill_matcher import (
    SkillTaxonomyMatcher,
    build_token_matcher,
    is_word_bounded,
    unique_skills,
)
from etl.resume.taxonomy import DEFAULT_SKILL_CATEGORIES, SkillTaxonomy


@pytest.fixture
def matcher():
    return SkillTaxonomyMatcher()


class TestDefaultTaxonomy:

    def test_word_boundaries_are_respected(self, matcher):
        skills = matcher.match("Built services in Go and Java, later JavaScript. Worked at Google.")

        languages = skills["Programming Languages"]
        assert "go" in languages
        assert "java" in languages
        assert "javascript" in languages

    def test_go_and_java_not_javascript(self, matcher):
        skills = matcher.match("I use Go and Java, not javascript")

        languages = skills["Programming Languages"]
        assert "go" in languages
        assert "java" in languages

    def test_expert_in_c_family(self, matcher):
        languages = matcher.match("Expert in C++ and C#")["Programming Languages"]

        assert languages == ["c++", "c#"]

    def test_no_substring_false_positives(self, matcher):
        skills = matcher.match("Worked at Google on Javascript tooling")

        languages = skills["Programming Languages"]
        assert "go" not in languages
        assert "java" not in languages
        assert "javascript" in languages

    def test_symbol_tokens_use_containment(self, matcher):
        skills = matcher.match("Systems work in C++ and services in C#")

        languages = skills["Programming Languages"]
        assert "c++" in languages
        assert "c#" in languages

    def test_multi_word_tokens(self, matcher):
        skills = matcher.match("Computer Vision research, strong Problem Solving")

        assert "computer vision" in skills["Machine Learning"]
        assert "problem solving" in skills["Soft Skills"]

    def test_categories_without_matches_are_omitted(self, matcher):
        skills = matcher.match("Python")

        assert list(skills.keys()) == ["Programming Languages"]

    def test_tokens_keep_taxonomy_order(self, matcher):
        skills = matcher.match("rust, go, python")

        assert skills["Programming Languages"] == ["python", "go", "rust"]

    def test_empty_text(self, matcher):
        assert matcher.match("") == {}

    def test_same_skill_in_two_categories_counts_once(self):
        taxonomy = SkillTaxonomy.from_dict({"A": ["python", "sql"], "B": ["sql"]})

        skills = SkillTaxonomyMatcher(taxonomy).match("python and SQL")

        assert skills == {"A": ["python", "sql"], "B": ["sql"]}
        assert unique_skills(skills) == ["python", "sql"]


class TestTokenStrategies:

    @pytest.mark.parametrize("token,expected", [
        ("go", True),
        ("node.js", True),
        ("computer vision", True),
        ("c++", False),
        ("c#", False),
        (".net", False),
    ])
    def test_is_word_bounded(self, token, expected):
        assert is_word_bounded(token) is expected

    def test_whole_word_matcher(self):
        matches = build_token_matcher("go")

        assert matches("i write go daily")
        assert not matches("google")

    def test_containment_matcher(self):
        matches = build_token_matcher(".net")

        assert matches("asp.net core")


class TestTaxonomy:

    def test_default_contains_every_category(self):
        taxonomy = SkillTaxonomy.default()

        assert len(taxonomy) == len(DEFAULT_SKILL_CATEGORIES)

    def test_from_dict_normalises_tokens(self):
        taxonomy = SkillTaxonomy.from_dict({"Langs": ["Python", " python ", "Go", ""]})

        assert taxonomy.categories["Langs"] == ("python", "go")

    def test_taxonomy_is_read_only(self):
        taxonomy = SkillTaxonomy.default()

        with pytest.raises(TypeError):
            taxonomy.categories["New"] = ("x",)

    def test_custom_taxonomy(self):
        matcher = SkillTaxonomyMatcher(SkillTaxonomy.from_dict({"Data": ["spark", "airflow"]}))

        assert matcher.match("Python, Spark and Airflow") == {"Data": ["spark", "airflow"]}

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "taxonomy.yaml"
        path.write_text("Data:\n  - Spark\n  - dbt\nCloud:\n  - aws\n", encoding="utf-8")

        taxonomy = SkillTaxonomy.from_yaml(str(path))

        assert dict(taxonomy.items()) == {"Data": ("spark", "dbt"), "Cloud": ("aws",)}

    def test_from_yaml_rejects_bad_shape(self, tmp_path):
        path = tmp_path / "taxonomy.yaml"
        path.write_text("- python\n- java\n", encoding="utf-8")

        with pytest.raises(ValueError):
            SkillTaxonomy.from_yaml(str(path))


def test_unique_skills_sorted():
    assert unique_skills({"A": ["sql", "python"], "B": ["aws", "sql"]}) == ["aws", "python", "sql"]
