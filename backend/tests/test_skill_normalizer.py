"""Tests for skill normalization against the canonical vocabulary."""

from models.schemas.job_posting import JobPosting
from services.skill_normalizer import normalize, normalize_declared, resolve_job_skills

ALICE = "Alice knows Rust, Docker, PostgreSQL, and Python. Worked with NLP."


def test_normalize_finds_canonical_skills():
    skills = normalize(ALICE)
    assert {"rust", "docker", "postgresql", "python", "nlp"} <= skills


def test_normalize_is_deterministic():
    assert normalize(ALICE) == normalize(ALICE)


def test_normalize_empty_and_punctuation_only():
    assert normalize("") == frozenset()
    assert normalize("   \n\t ") == frozenset()
    assert normalize("!!! ,,, ... ---") == frozenset()


def test_normalize_is_case_insensitive():
    assert normalize("PYTHON and dOcKeR") == {"python", "docker"}


def test_normalize_avoids_partial_token_matches():
    skills = normalize("Chemical reaction kinetics, a rusty scalable gitlab-free setup")
    assert "react" not in skills  # "react" should not match inside "reaction"
    assert "rust" not in skills  # "rust" should not match inside "rusty"
    assert "scala" not in skills
    assert "git" not in skills


def test_normalize_java_not_in_javascript():
    skills = normalize("Proficient in JavaScript")
    assert "javascript" in skills
    assert "java" not in skills


def test_normalize_sql_not_in_postgresql():
    skills = normalize("Tuned PostgreSQL queries")
    assert skills == {"postgresql"}


def test_normalize_aliases_collapse_to_one_identifier():
    assert normalize("JS and JavaScript and ECMAScript") == {"javascript"}
    assert normalize("Postgres, PostgreSQL") == {"postgresql"}
    assert normalize("NLP (natural language processing)") == {"nlp"}


def test_normalize_symbol_and_dotted_names():
    skills = normalize("Wrote C++ services and Node.js APIs, plus some C# tooling")
    assert {"c++", "node.js", "c#"} <= skills
    # "js" inside "Node.js" is not a separate JavaScript mention
    assert "javascript" not in skills


def test_normalize_spaced_node_js_is_not_javascript():
    assert normalize("node js developer") == {"node.js"}
    assert normalize("Vue.js front end, React.js widgets") == {"vue", "react"}


def test_normalize_skill_after_period_or_hash():
    assert normalize("1.Python 2.Docker") == {"python", "docker"}
    assert normalize("#rust") == {"rust"}
    assert normalize("Skills:Linux;Kafka") == {"linux", "kafka"}


def test_normalize_respects_non_ascii_word_characters():
    assert normalize("Rust\u00e9 lang") == frozenset()
    assert normalize("\u00e9python") == frozenset()
    assert normalize("Rust \u00e9t\u00e9") == {"rust"}


def test_normalize_multiword_pattern_across_line_break():
    assert "machine learning" in normalize("Applied machine\nlearning to search")


def test_normalize_with_explicit_vocabulary(small_vocabulary):
    assert normalize("Kubernetes, js, Rust", small_vocabulary) == {"javascript", "rust"}


def test_normalize_declared_lowercases_and_resolves_aliases(small_vocabulary):
    declared = normalize_declared(["Rust", " JS ", "Postgres", "", "  "], small_vocabulary)
    assert declared == {"rust", "javascript", "postgresql"}


def test_normalize_declared_keeps_unknown_literals(small_vocabulary):
    declared = normalize_declared(["COBOL", "Mainframe  Ops"], small_vocabulary)
    assert declared == {"cobol", "mainframe ops"}


def test_resolve_job_skills_prefers_declared(small_vocabulary):
    job = JobPosting(
        id="j1",
        title="Backend",
        description="We use Python and React",
        required_skills=["rust", "docker"],
    )
    assert resolve_job_skills(job, small_vocabulary) == {"rust", "docker"}


def test_resolve_job_skills_falls_back_to_description(small_vocabulary):
    job = JobPosting(id="j1", title="Backend", description="We use Python and React")
    assert resolve_job_skills(job, small_vocabulary) == {"python", "react"}


def test_resolve_job_skills_blank_declared_list_uses_description(small_vocabulary):
    job = JobPosting(
        id="j1", title="Backend", description="Docker everywhere", required_skills=["", " "]
    )
    assert resolve_job_skills(job, small_vocabulary) == {"docker"}


def test_job_posting_accepts_null_required_skills():
    job = JobPosting(id="j1", title="t", description="d", required_skills=None)
    assert job.required_skills == []
