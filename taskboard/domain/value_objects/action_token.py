"""ActionToken value object.

Tagged form of an action string: a verb plus an optional scope qualifier.
Parsing happens once, when the permission table is built or a request
names an action, so the engine never re-inspects raw suffixes.
"""

from dataclasses import dataclass

from taskboard.domain.enums import ActionVerb, ScopeQualifier


@dataclass(frozen=True, slots=True)
class ActionToken:
    """A verb optionally narrowed by a scope qualifier.

    Attributes:
        verb: Base verb (create, read, update, delete, start, complete).
        scope: Scope qualifier, or None for an unscoped (instance-independent) token.

    Example:
        >>> ActionToken.parse("update_assigned")
        ActionToken(verb=<ActionVerb.UPDATE: 'update'>, scope=<ScopeQualifier.ASSIGNED: 'assigned'>)
        >>> str(ActionToken(ActionVerb.READ))
        'read'
    """

    verb: ActionVerb
    scope: ScopeQualifier | None = None

    @classmethod
    def parse(cls, text: str) -> "ActionToken":
        """Parse the ``verb`` / ``verb_qualifier`` string form.

        Qualifiers are tried in ScopeQualifier declaration order; the first
        suffix that leaves a known verb wins.

        Args:
            text: Action string such as "read", "delete_own", "read_all".

        Returns:
            ActionToken: Parsed token.

        Raises:
            ValueError: If the verb or qualifier is not in the vocabulary.
        """
        if not isinstance(text, str) or not text:
            raise ValueError(f"Invalid action token: {text!r}")

        if text in ActionVerb.values():
            return cls(ActionVerb(text))

        for qualifier in ScopeQualifier:
            suffix = f"_{qualifier.value}"
            if text.endswith(suffix):
                base = text[: -len(suffix)]
                if base in ActionVerb.values():
                    return cls(ActionVerb(base), qualifier)

        raise ValueError(f"Invalid action token: {text!r}")

    @classmethod
    def coerce(cls, value: "ActionToken | str") -> "ActionToken":
        """Return value unchanged if already a token, else parse it.

        Raises:
            ValueError: If a string value cannot be parsed.
        """
        if isinstance(value, ActionToken):
            return value
        return cls.parse(value)

    @property
    def is_scoped(self) -> bool:
        """True when the token carries a scope qualifier."""
        return self.scope is not None

    def __str__(self) -> str:
        """Return the string form ("verb" or "verb_qualifier")."""
        if self.scope is None:
            return self.verb.value
        return f"{self.verb.value}_{self.scope.value}"
