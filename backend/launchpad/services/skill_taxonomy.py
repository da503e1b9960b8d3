"""
Skill Taxonomy - Canonical skill names and alias normalization

Maps free-text skill strings onto a fixed vocabulary of canonical skills so
that "JS", "JavaScript" and "ecmascript" all compare equal during matching.

Structure: canonical -> [variants]

Normalization Rules:
    1. Trim and lower-case the input
    2. Exact canonical key -> returned as-is
    3. Listed variant -> its canonical key
    4. Anything else passes through lower-cased (unknown skills stay
       matchable by exact string instead of being dropped)

normalize_skill() is total and idempotent; non-string input yields None.
"""

from typing import Any, Dict, List, Optional

SKILLS_TAXONOMY: Dict[str, List[str]] = {
    # Programming languages
    "javascript": ["js", "javascript", "ecmascript", "es6", "es2015"],
    "typescript": ["ts", "typescript"],
    "python": ["python", "python3", "py"],
    "java": ["java", "java se", "java ee"],
    "c++": ["c++", "cpp", "cplusplus"],
    "c#": ["c#", "csharp", "c sharp"],
    "c": ["c", "c programming"],
    "go": ["go", "golang"],
    "rust": ["rust"],
    "ruby": ["ruby", "rb"],
    "php": ["php"],
    "swift": ["swift"],
    "kotlin": ["kotlin"],
    "scala": ["scala"],
    "r": ["r", "r programming"],
    "matlab": ["matlab"],
    "sql": ["sql", "structured query language"],
    "html": ["html", "html5"],
    "css": ["css", "css3"],

    # Frontend frameworks/libraries
    "react": ["react", "reactjs", "react.js"],
    "vue": ["vue", "vuejs", "vue.js"],
    "angular": ["angular", "angularjs"],
    "svelte": ["svelte"],
    "next.js": ["next", "nextjs", "next.js"],
    "nuxt": ["nuxt", "nuxtjs"],
    "gatsby": ["gatsby", "gatsbyjs"],

    # Backend frameworks
    "node.js": ["node", "nodejs", "node.js"],
    "express": ["express", "expressjs", "express.js"],
    "django": ["django"],
    "flask": ["flask"],
    "fastapi": ["fastapi"],
    "spring": ["spring", "spring boot", "spring framework"],
    "asp.net": ["asp.net", "aspnet", ".net"],
    "rails": ["rails", "ruby on rails", "ror"],

    # Databases
    "mongodb": ["mongodb", "mongo"],
    "postgresql": ["postgresql", "postgres", "psql"],
    "mysql": ["mysql"],
    "redis": ["redis"],
    "dynamodb": ["dynamodb"],
    "firebase": ["firebase", "firestore"],
    "sqlite": ["sqlite"],
    "cassandra": ["cassandra"],
    "elasticsearch": ["elasticsearch", "elastic"],

    # Cloud & DevOps
    "aws": ["aws", "amazon web services"],
    "azure": ["azure", "microsoft azure"],
    "gcp": ["gcp", "google cloud", "google cloud platform"],
    "docker": ["docker"],
    "kubernetes": ["kubernetes", "k8s"],
    "terraform": ["terraform"],
    "jenkins": ["jenkins"],
    "github actions": ["github actions", "gh actions"],
    "ci/cd": ["ci/cd", "cicd", "continuous integration"],

    # Data science & ML
    "tensorflow": ["tensorflow", "tf"],
    "pytorch": ["pytorch", "torch"],
    "scikit-learn": ["scikit-learn", "sklearn", "scikit learn"],
    "pandas": ["pandas"],
    "numpy": ["numpy"],
    "jupyter": ["jupyter", "jupyter notebook"],
    "keras": ["keras"],
    "opencv": ["opencv", "cv2"],

    # Tools & platforms
    "git": ["git", "version control"],
    "github": ["github"],
    "gitlab": ["gitlab"],
    "jira": ["jira"],
    "figma": ["figma"],
    "vscode": ["vscode", "vs code", "visual studio code"],
    "postman": ["postman"],
    "linux": ["linux", "unix"],
    "bash": ["bash", "shell"],

    # Testing
    "jest": ["jest"],
    "pytest": ["pytest"],
    "selenium": ["selenium"],
    "cypress": ["cypress"],
    "junit": ["junit"],

    # Soft skills
    "agile": ["agile", "scrum", "kanban"],
    "leadership": ["leadership", "team lead"],
    "communication": ["communication", "collaboration"],
    "problem solving": ["problem solving", "debugging"],
    "project management": ["project management", "pm"],
}


def _build_alias_index(taxonomy: Dict[str, List[str]]) -> Dict[str, str]:
    """Flatten the taxonomy into variant -> canonical; canonical keys win."""
    index: Dict[str, str] = {}
    for canonical, variants in taxonomy.items():
        for variant in variants:
            index.setdefault(variant.lower().strip(), canonical)
    for canonical in taxonomy:
        index[canonical] = canonical
    return index


_ALIAS_INDEX = _build_alias_index(SKILLS_TAXONOMY)


def normalize_skill(skill: Any) -> Optional[str]:
    """
    Normalize a skill name to its canonical form.

    Args:
        skill: Raw skill name (any case, surrounding whitespace allowed)

    Returns:
        Canonical skill name, the lower-cased input when it is not in the
        taxonomy, or None for non-string/blank input.

    Example:
        >>> normalize_skill("  JS ")
        'javascript'
        >>> normalize_skill("Quantum Basket Weaving")
        'quantum basket weaving'
    """
    if not isinstance(skill, str):
        return None

    normalized = skill.lower().strip()
    if not normalized:
        return None

    return _ALIAS_INDEX.get(normalized, normalized)


def normalize_skills(skills: Any) -> List[str]:
    """
    Normalize a collection of skills, dropping invalid entries and duplicates.

    Args:
        skills: Iterable of raw skill names; anything that is not a
            list/tuple/set yields an empty result

    Returns:
        Unique canonical skill names in first-seen order
    """
    if not isinstance(skills, (list, tuple, set, frozenset)):
        return []

    seen = set()
    result = []
    for skill in skills:
        canonical = normalize_skill(skill)
        if canonical is not None and canonical not in seen:
            seen.add(canonical)
            result.append(canonical)
    return result


def get_skill_variations(canonical_skill: Optional[str]) -> List[str]:
    """Get all listed variations of a canonical skill (empty if unknown)."""
    if not canonical_skill:
        return []
    return list(SKILLS_TAXONOMY.get(canonical_skill.lower().strip(), []))
