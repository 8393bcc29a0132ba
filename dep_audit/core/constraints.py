"""Composer version constraint matching built on packaging specifiers."""

import re
from functools import lru_cache
from typing import List, Optional, Tuple
from packaging import version as packaging_version
from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import Version


class InvalidConstraintError(ValueError):
    """A version or constraint string could not be interpreted."""


_STABILITY_FLAG = re.compile(r'@(?:dev|alpha|beta|rc|stable)$', re.IGNORECASE)
_OR_SPLIT = re.compile(r'\s*\|\|?\s*')
_AND_SPLIT = re.compile(r'\s*,\s*|\s+')
_HYPHEN_RANGE = re.compile(r'^(\S+)\s+-\s+(\S+)$')
_OPERATOR_SPACING = re.compile(r'(>=|<=|!=|==|<>|>|<|=|\^|~)\s+')
_OPERATOR = re.compile(r'^(>=|<=|!=|==|<>|>|<|=)?(.+)$')
_VERSION = re.compile(
    r'^v?(\d+)(?:\.(\d+|[x*]))?(?:\.(\d+|[x*]))?(?:\.(\d+|[x*]))?(.*)$',
    re.IGNORECASE
)
_RELEASE_PREFIX = re.compile(r'^v?(\d+(?:\.\d+)*)')


def _split_version(text: str) -> Tuple[List[int], bool, str]:
    """Split a constraint version into numeric parts, wildcard flag and suffix.

    Args:
        text: Version part of a constraint term, e.g. ``8.1``, ``2.*``, ``1.0.0-beta1``

    Returns:
        Tuple of (numeric parts, whether a wildcard segment was present, suffix)
    """
    if text in ("*", "x", "X"):
        return [], True, ""

    match = _VERSION.match(text)
    if not match:
        raise InvalidConstraintError(f"Invalid version in constraint: {text}")

    parts: List[int] = []
    wildcard = False
    for group in match.groups()[:4]:
        if group is None:
            break
        if group.lower() in ("x", "*"):
            wildcard = True
            break
        parts.append(int(group))

    suffix = match.group(5) or ""
    if wildcard and suffix:
        raise InvalidConstraintError(f"Invalid wildcard version in constraint: {text}")
    return parts, wildcard, suffix


def _version_string(parts: List[int], suffix: str = "") -> str:
    text = ".".join(str(part) for part in parts) + suffix
    try:
        return str(Version(text))
    except packaging_version.InvalidVersion:
        raise InvalidConstraintError(f"Invalid version in constraint: {text}") from None


def _lower_bound(parts: List[int], suffix: str = "") -> str:
    """Inclusive lower bound that also admits pre-releases of that version."""
    if suffix:
        return f">={_version_string(parts, suffix)}"
    return f">={_version_string(parts)}.dev0"


def _bump(parts: List[int], index: int) -> str:
    """Increment the segment at index and drop everything after it."""
    bumped = parts[:index] + [parts[index] + 1]
    return _version_string(bumped)


def _translate_caret(text: str) -> List[str]:
    parts, wildcard, suffix = _split_version(text)
    if wildcard or not parts:
        raise InvalidConstraintError(f"Invalid caret constraint: ^{text}")

    # Leftmost non-zero segment stays fixed
    index = next((i for i, part in enumerate(parts) if part != 0), len(parts) - 1)
    return [_lower_bound(parts, suffix), f"<{_bump(parts, index)}"]


def _translate_tilde(text: str) -> List[str]:
    parts, wildcard, suffix = _split_version(text)
    if wildcard or not parts:
        raise InvalidConstraintError(f"Invalid tilde constraint: ~{text}")

    index = 0 if len(parts) == 1 else len(parts) - 2
    return [_lower_bound(parts, suffix), f"<{_bump(parts, index)}"]


def _translate_hyphen(lower: str, upper: str) -> List[str]:
    lower_parts, lower_wildcard, lower_suffix = _split_version(lower)
    upper_parts, upper_wildcard, upper_suffix = _split_version(upper)
    if lower_wildcard or upper_wildcard or not lower_parts or not upper_parts:
        raise InvalidConstraintError(f"Invalid hyphen range: {lower} - {upper}")

    specifiers = [_lower_bound(lower_parts, lower_suffix)]
    if len(upper_parts) < 3 and not upper_suffix:
        # Partial upper bound covers the whole last given segment
        specifiers.append(f"<{_bump(upper_parts, len(upper_parts) - 1)}")
    else:
        specifiers.append(f"<={_version_string(upper_parts, upper_suffix)}")
    return specifiers


def _translate_term(term: str) -> List[str]:
    """Translate a single Composer term into packaging specifier strings.

    Args:
        term: One AND-term, e.g. ``^8.1``, ``>=7.4``, ``2.3.*``

    Returns:
        List of specifier strings; an empty list matches every version
    """
    term = _STABILITY_FLAG.sub("", term)
    if term in ("", "*"):
        return []

    if term.startswith("^"):
        return _translate_caret(term[1:])

    if term.startswith("~"):
        return _translate_tilde(term[1:])

    match = _OPERATOR.match(term)
    if not match:
        raise InvalidConstraintError(f"Invalid constraint term: {term}")
    operator, text = match.group(1), match.group(2)

    parts, wildcard, suffix = _split_version(text)
    if wildcard:
        if operator not in (None, "=", "=="):
            raise InvalidConstraintError(f"Wildcard cannot be combined with {operator}: {term}")
        if not parts:
            return []
        return [_lower_bound(parts), f"<{_bump(parts, len(parts) - 1)}"]

    if operator == ">=":
        return [_lower_bound(parts, suffix)]

    version_text = _version_string(parts, suffix)
    if operator in (None, "=", "=="):
        return [f"=={version_text}"]
    if operator == "<>":
        operator = "!="
    return [f"{operator}{version_text}"]


def _translate_alternative(alternative: str) -> SpecifierSet:
    hyphen = _HYPHEN_RANGE.match(alternative)
    if hyphen:
        specifiers = _translate_hyphen(hyphen.group(1), hyphen.group(2))
    else:
        alternative = _OPERATOR_SPACING.sub(r'\1', alternative)
        specifiers = []
        for term in _AND_SPLIT.split(alternative):
            if term:
                specifiers.extend(_translate_term(term))

    try:
        return SpecifierSet(",".join(specifiers))
    except InvalidSpecifier as e:
        raise InvalidConstraintError(f"Invalid constraint: {alternative}") from e


@lru_cache(maxsize=256)
def parse_constraint(constraint: str) -> Tuple[SpecifierSet, ...]:
    """Parse a Composer constraint into OR-ed specifier sets.

    Args:
        constraint: Composer version constraint, e.g. ``^7.4 || ^8.0``

    Returns:
        Tuple of specifier sets, any of which may match

    Raises:
        InvalidConstraintError: If the constraint cannot be interpreted
    """
    constraint = constraint.strip()
    if not constraint:
        raise InvalidConstraintError("Empty version constraint")

    alternatives = [part for part in _OR_SPLIT.split(constraint) if part]
    if not alternatives:
        raise InvalidConstraintError(f"Invalid constraint: {constraint}")
    return tuple(_translate_alternative(alternative) for alternative in alternatives)


def parse_version(text: str) -> Version:
    """Parse a runtime version string leniently.

    Distribution builds report versions like ``8.1.2-1ubuntu2.14``; when the
    full string is not a valid version only its numeric release is used.
    """
    text = text.strip()
    try:
        return Version(text)
    except packaging_version.InvalidVersion:
        match = _RELEASE_PREFIX.match(text)
        if not match:
            raise InvalidConstraintError(f"Invalid version: {text}") from None
        return Version(match.group(1))


def satisfies(version: str, constraint: str) -> bool:
    """Check whether a version satisfies a Composer constraint.

    Args:
        version: Concrete version, e.g. ``8.1.0``
        constraint: Composer constraint, e.g. ``^8.1``

    Returns:
        True if any alternative of the constraint matches the version
    """
    current_version = parse_version(version)
    return any(
        specifier_set.contains(current_version, prereleases=True)
        for specifier_set in parse_constraint(constraint)
    )


def stable_release(version: str) -> Optional[Version]:
    """Return the parsed version, or None when it is not a release version."""
    try:
        parsed = Version(version)
    except packaging_version.InvalidVersion:
        return None
    if parsed.is_prerelease or parsed.is_devrelease:
        return None
    return parsed
