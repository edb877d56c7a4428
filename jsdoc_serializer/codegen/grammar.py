"""Tag grammar table: one parsing rule per documentation tag."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterator, Sequence

from jsdoc_serializer.codegen.node import Node, NodeKind
from jsdoc_serializer.codegen.schemas import (
    AccessAttributes,
    AliasAttributes,
    Attributes,
    AuthorAttributes,
    BorrowsAttributes,
    CopyrightAttributes,
    DeclarationAttributes,
    DeprecatedAttributes,
    DescriptionAttributes,
    ErrorDescriptor,
    EventAttributes,
    KindAttributes,
    LicenseAttributes,
    NoAttributes,
    ParamAttributes,
    ReturnAttributes,
    SinceAttributes,
    TextAttributes,
    ThrowsAttributes,
    TodoAttributes,
    TypeDescriptor,
)
from jsdoc_serializer.errors import GrammarViolationError

logger = logging.getLogger(__name__)

ACCESSORS = ("public", "private", "protected", "package")

KINDS = (
    "class",
    "constant",
    "event",
    "external",
    "file",
    "function",
    "member",
    "mixin",
    "module",
    "namespace",
    "typedef",
)


@dataclass(frozen=True)
class GrammarContext:
    """Read-only state a rule may consult.

    ``previous_blocks`` holds the node lists of fully classified blocks,
    ``current_block`` the nodes classified so far in the block being built.
    """

    parent: Node | None = None
    previous_blocks: Sequence[Sequence[Node]] = ()
    current_block: Sequence[Node] = ()
    attach_todos: bool = False

    def iter_known_nodes(self) -> Iterator[Node]:
        """Yield every node produced so far, in source order."""
        for block in self.previous_blocks:
            yield from block
        yield from self.current_block

    def find_namespace(self, name: str) -> Node | None:
        """Find the first Namespace node declared with ``name``."""
        for node in self.iter_known_nodes():
            if node.kind is NodeKind.NAMESPACE and getattr(node.attributes, "name", None) == name:
                return node
        return None


ParseFn = Callable[["TagRule", list[str]], "Attributes | None"]
ParentFn = Callable[["TagRule", Attributes, GrammarContext], "Node | None"]


def _default_parent(rule: TagRule, attributes: Attributes, context: GrammarContext) -> Node | None:
    return context.parent


@dataclass(frozen=True)
class TagRule:
    """A tag grammar definition."""

    tag: str
    kind: NodeKind
    description: str
    parse_fn: ParseFn
    aliases: tuple[str, ...] = ()
    parent_fn: ParentFn = _default_parent

    @property
    def names(self) -> tuple[str, ...]:
        return (self.tag, *self.aliases)


@dataclass(frozen=True)
class TagMatch:
    """Result of applying a rule: the new node and the parent it belongs under."""

    node: Node
    parent: Node | None = None


# Token helpers


def _take_group(tokens: list[str], opener: str, closer: str) -> tuple[str | None, list[str]]:
    """Take a delimited group such as ``{Object<string, number>}`` off the front.

    The group may span several whitespace-separated tokens. Returns the group
    text with its outer delimiters removed and the remaining tokens.
    """
    if not tokens or not tokens[0].startswith(opener):
        return None, list(tokens)

    for end, token in enumerate(tokens):
        if token.endswith(closer):
            raw = " ".join(tokens[: end + 1])
            return raw[len(opener):-len(closer)], list(tokens[end + 1:])

    # Unclosed: best effort, treat the first token alone as the group
    return tokens[0][len(opener):], list(tokens[1:])


def _parse_type(text: str, generic: bool = False) -> TypeDescriptor:
    nullable = text.startswith("?")
    name = text[1:] if nullable else text

    if generic and "<" in name:
        outer, _, inner = name.partition("<")
        if inner.endswith(">"):
            inner = inner[:-1]
        return TypeDescriptor(name=outer, nullable=nullable, generic=inner, full=text)

    return TypeDescriptor(name=name, nullable=nullable)


def _take_type(tokens: list[str], generic: bool = False) -> tuple[TypeDescriptor | None, list[str]]:
    text, rest = _take_group(tokens, "{", "}")
    if text is None:
        return None, rest
    return _parse_type(text, generic=generic), rest


def _joined(tokens: Sequence[str]) -> str | None:
    text = " ".join(tokens)
    return text or None


# Rules


def _parse_param(rule: TagRule, tokens: list[str]) -> ParamAttributes:
    typeof, rest = _take_type(tokens)

    name = None
    default = None
    optional = False
    bracketed, rest = _take_group(rest, "[", "]")
    if bracketed is not None:
        optional = True
        name, sep, value = bracketed.partition("=")
        name = name.strip()
        if sep:
            default = value.strip()
    elif rest:
        name = rest.pop(0)

    return ParamAttributes(
        name=name,
        description=" ".join(rest).replace("- ", ""),
        typeof=typeof,
        default=default,
        optional=optional,
    )


def _parse_return(rule: TagRule, tokens: list[str]) -> ReturnAttributes:
    typeof, rest = _take_type(tokens, generic=True)
    return ReturnAttributes(description=" ".join(rest) or "None", typeof=typeof)


def _parse_access(rule: TagRule, tokens: list[str]) -> AccessAttributes:
    if len(tokens) != 1 or tokens[0] not in ACCESSORS:
        raise GrammarViolationError(rule.tag, " ".join(tokens), ACCESSORS)
    return AccessAttributes(accessor=tokens[0])


def _parse_kind(rule: TagRule, tokens: list[str]) -> KindAttributes:
    if len(tokens) != 1 or tokens[0] not in KINDS:
        raise GrammarViolationError(rule.tag, " ".join(tokens), KINDS)
    return KindAttributes(value=tokens[0])


def _parse_alias(rule: TagRule, tokens: list[str]) -> AliasAttributes | None:
    if not tokens:
        return None

    target = tokens[0]
    namespace, dot, member = target.rpartition(".")
    if not dot or not namespace:
        return AliasAttributes(target=target, name=target)
    return AliasAttributes(target=target, name=member, namespace=namespace)


def _alias_parent(rule: TagRule, attributes: Attributes, context: GrammarContext) -> Node | None:
    namespace = getattr(attributes, "namespace", None)
    if namespace:
        owner = context.find_namespace(namespace)
        if owner is not None:
            return owner
        logger.debug("Alias namespace %r not declared yet; keeping default parent", namespace)
    return context.parent


def _parse_author(rule: TagRule, tokens: list[str]) -> AuthorAttributes:
    if not tokens:
        return AuthorAttributes()

    url = None
    last = tokens[-1]
    if len(tokens) > 1 and last.startswith("<") and last.endswith(">"):
        url = last[1:-1]
    return AuthorAttributes(name=tokens[0], url=url)


def _parse_copyright(rule: TagRule, tokens: list[str]) -> CopyrightAttributes:
    author = tokens[0] if tokens else None
    year = None
    if len(tokens) > 1:
        year = tokens[1].replace("&year;", str(datetime.now().year))
    return CopyrightAttributes(author=author, year=year)


def _parse_since(rule: TagRule, tokens: list[str]) -> SinceAttributes:
    return SinceAttributes(since=" ".join(tokens) or "0.0.0")


def _parse_throws(rule: TagRule, tokens: list[str]) -> ThrowsAttributes:
    typeof, rest = _take_type(tokens)
    if typeof is not None:
        error = ErrorDescriptor(type=typeof.name)
    elif rest:
        error = ErrorDescriptor(type=rest.pop(0))
    else:
        error = ErrorDescriptor()
    return ThrowsAttributes(error=error, description=" ".join(rest) or "None")


def _parse_todo(rule: TagRule, tokens: list[str]) -> TodoAttributes:
    return TodoAttributes(todo=" ".join(tokens))


def _todo_parent(rule: TagRule, attributes: Attributes, context: GrammarContext) -> Node | None:
    return context.parent if context.attach_todos else None


def _parse_deprecated(rule: TagRule, tokens: list[str]) -> DeprecatedAttributes:
    return DeprecatedAttributes(description=_joined(tokens))


def _parse_event(rule: TagRule, tokens: list[str]) -> EventAttributes:
    return EventAttributes(event=tokens[0] if tokens else None)


def _parse_license(rule: TagRule, tokens: list[str]) -> LicenseAttributes:
    return LicenseAttributes(license=_joined(tokens))


def _parse_declaration(rule: TagRule, tokens: list[str]) -> DeclarationAttributes:
    typeof, rest = _take_type(tokens)
    return DeclarationAttributes(name=rest[0] if rest else None, typeof=typeof)


def _parse_borrows(rule: TagRule, tokens: list[str]) -> BorrowsAttributes:
    source = tokens[0] if tokens else None
    target = tokens[2] if len(tokens) > 2 and tokens[1] == "as" else None
    return BorrowsAttributes(source=source, target=target)


def _parse_text(rule: TagRule, tokens: list[str]) -> TextAttributes:
    return TextAttributes(text=" ".join(tokens))


def _parse_description(rule: TagRule, tokens: list[str]) -> DescriptionAttributes:
    return DescriptionAttributes(description=" ".join(tokens))


def _parse_marker(rule: TagRule, tokens: list[str]) -> NoAttributes:
    return NoAttributes()


MARKERS: tuple[tuple[str, NodeKind, tuple[str, ...]], ...] = (
    ("abstract", NodeKind.ABSTRACT, ("virtual",)),
    ("async", NodeKind.ASYNC, ()),
    ("static", NodeKind.STATIC, ()),
    ("private", NodeKind.PRIVATE, ()),
    ("public", NodeKind.PUBLIC, ()),
    ("protected", NodeKind.PROTECTED, ()),
    ("readonly", NodeKind.READONLY, ()),
    ("override", NodeKind.OVERRIDE, ()),
    ("ignore", NodeKind.IGNORE, ()),
    ("inner", NodeKind.INNER, ()),
    ("instance", NodeKind.INSTANCE, ()),
    ("global", NodeKind.GLOBAL, ()),
    ("generator", NodeKind.GENERATOR, ()),
    ("hideconstructor", NodeKind.HIDE_CONSTRUCTOR, ()),
    ("inheritdoc", NodeKind.INHERIT_DOC, ()),
    ("package", NodeKind.PACKAGE, ()),
)

DECLARATIONS: tuple[tuple[str, NodeKind, tuple[str, ...], str], ...] = (
    ("namespace", NodeKind.NAMESPACE, (), "Namespace that aliases can attach to"),
    ("class", NodeKind.CLASS, ("constructor",), "Class or constructor"),
    ("constant", NodeKind.CONSTANT, ("const",), "Constant value"),
    ("member", NodeKind.MEMBER, ("var",), "Member variable"),
    ("typedef", NodeKind.TYPEDEF, (), "Custom type definition"),
    ("type", NodeKind.TYPE, (), "Type of the documented symbol"),
    ("enum", NodeKind.ENUM, (), "Enumeration"),
    ("this", NodeKind.THIS, (), "Meaning of `this`"),
    ("callback", NodeKind.CALLBACK, (), "Callback signature"),
    ("event", NodeKind.EVENT, (), "Event declaration"),
    ("function", NodeKind.FUNCTION, ("func", "method"), "Function or method"),
    ("interface", NodeKind.INTERFACE, (), "Interface"),
    ("mixin", NodeKind.MIXIN, (), "Mixin"),
    ("module", NodeKind.MODULE, (), "Module"),
    ("name", NodeKind.NAME, (), "Explicit symbol name"),
    ("external", NodeKind.EXTERNAL, ("host",), "External symbol"),
    ("exports", NodeKind.EXPORTS, (), "Exported member"),
    ("memberof", NodeKind.MEMBER_OF, (), "Owning symbol"),
    ("lends", NodeKind.LENDS, (), "Object literal lending"),
    ("requires", NodeKind.REQUIRES, (), "Required module"),
    ("tutorial", NodeKind.TUTORIAL, (), "Tutorial link"),
    ("mixes", NodeKind.MIXES, (), "Mixed-in symbol"),
    ("implements", NodeKind.IMPLEMENTS, (), "Implemented interface"),
    ("augments", NodeKind.AUGMENTS, ("extends",), "Parent class"),
    ("constructs", NodeKind.CONSTRUCTS, (), "Constructed class"),
)


class TagGrammar:
    """Registry mapping tag names to their grammar rules."""

    def __init__(self) -> None:
        """Initialize grammar with default rules."""
        self.rules: dict[str, TagRule] = {}
        self._register_default_rules()

    def register(self, rule: TagRule) -> None:
        """Register a rule under its tag and all of its aliases."""
        for name in rule.names:
            self.rules[name.lower()] = rule

    def get_rule(self, tag: str) -> TagRule | None:
        """Look up a rule by tag name (case-insensitive)."""
        return self.rules.get(tag.lower())

    def parse(self, tag: str, tokens: Sequence[str], context: GrammarContext) -> TagMatch | None:
        """Apply the rule for ``tag`` to the tokens following it.

        Args:
            tag: Tag name without the ``@`` marker.
            tokens: Whitespace-delimited tokens after the tag.
            context: Parent and cross-block lookup state.

        Returns:
            The new (unlinked) node and its intended parent, or None when the
            tag is unknown or the rule has nothing to record.

        Raises:
            GrammarViolationError: A required token fails validation.
        """
        rule = self.get_rule(tag)
        if rule is None:
            logger.debug("Ignoring unknown tag @%s", tag)
            return None

        attributes = rule.parse_fn(rule, list(tokens))
        if attributes is None:
            logger.debug("@%s produced no node", tag)
            return None

        node = Node.from_kind(rule.kind, attributes)
        return TagMatch(node=node, parent=rule.parent_fn(rule, attributes, context))

    def list_rules(self) -> list[dict[str, Any]]:
        """List registered rules (each once, in registration order)."""
        seen: list[TagRule] = []
        for rule in self.rules.values():
            if rule not in seen:
                seen.append(rule)
        return [
            {
                "tag": rule.tag,
                "aliases": list(rule.aliases),
                "kind": rule.kind.value,
                "description": rule.description,
            }
            for rule in seen
        ]

    def _register_default_rules(self) -> None:
        """Register the JSDoc tag vocabulary."""
        self.register(TagRule(
            tag="param",
            kind=NodeKind.PARAM,
            description="Parameter with optional {type} and [name=default]",
            parse_fn=_parse_param,
            aliases=("arg", "argument"),
        ))
        self.register(TagRule(
            tag="property",
            kind=NodeKind.PROPERTY,
            description="Object property, same grammar as @param",
            parse_fn=_parse_param,
            aliases=("prop",),
        ))
        self.register(TagRule(
            tag="returns",
            kind=NodeKind.RETURN,
            description="Return value with optional generic {type}",
            parse_fn=_parse_return,
            aliases=("return",),
        ))
        self.register(TagRule(
            tag="yields",
            kind=NodeKind.YIELDS,
            description="Yielded value, same grammar as @returns",
            parse_fn=_parse_return,
            aliases=("yield",),
        ))
        self.register(TagRule(
            tag="access",
            kind=NodeKind.ACCESS,
            description=f"Access level: {', '.join(ACCESSORS)}",
            parse_fn=_parse_access,
        ))
        self.register(TagRule(
            tag="kind",
            kind=NodeKind.KIND,
            description="Symbol kind from the JSDoc kind vocabulary",
            parse_fn=_parse_kind,
        ))
        self.register(TagRule(
            tag="alias",
            kind=NodeKind.ALIAS,
            description="Alias; dotted targets attach to a declared namespace",
            parse_fn=_parse_alias,
            parent_fn=_alias_parent,
        ))
        self.register(TagRule(
            tag="author",
            kind=NodeKind.AUTHOR,
            description="Author name with optional <url>",
            parse_fn=_parse_author,
        ))
        self.register(TagRule(
            tag="copyright",
            kind=NodeKind.COPYRIGHT,
            description="Copyright holder and year (&year; is the current year)",
            parse_fn=_parse_copyright,
        ))
        self.register(TagRule(
            tag="since",
            kind=NodeKind.SINCE,
            description="Version the symbol was added in (default 0.0.0)",
            parse_fn=_parse_since,
        ))
        self.register(TagRule(
            tag="throws",
            kind=NodeKind.THROWS,
            description="Thrown error type (default Error) and description",
            parse_fn=_parse_throws,
            aliases=("exception",),
        ))
        self.register(TagRule(
            tag="todo",
            kind=NodeKind.TODO,
            description="Pending work item",
            parse_fn=_parse_todo,
            parent_fn=_todo_parent,
        ))
        self.register(TagRule(
            tag="deprecated",
            kind=NodeKind.DEPRECATED,
            description="Deprecation notice",
            parse_fn=_parse_deprecated,
        ))
        self.register(TagRule(
            tag="fires",
            kind=NodeKind.FIRES,
            description="Event fired by the symbol",
            parse_fn=_parse_event,
            aliases=("emits",),
        ))
        self.register(TagRule(
            tag="listens",
            kind=NodeKind.LISTENS,
            description="Event listened to by the symbol",
            parse_fn=_parse_event,
        ))
        self.register(TagRule(
            tag="license",
            kind=NodeKind.LICENSE,
            description="License identifier or text",
            parse_fn=_parse_license,
        ))
        self.register(TagRule(
            tag="borrows",
            kind=NodeKind.BORROWS,
            description="Borrowed documentation: <source> as <target>",
            parse_fn=_parse_borrows,
        ))
        self.register(TagRule(
            tag="description",
            kind=NodeKind.DESCRIPTION,
            description="Explicit description",
            parse_fn=_parse_description,
            aliases=("desc",),
        ))
        self.register(TagRule(
            tag="classdesc",
            kind=NodeKind.CLASS_DESCRIPTION,
            description="Class description",
            parse_fn=_parse_description,
        ))
        self.register(TagRule(
            tag="file",
            kind=NodeKind.FILE,
            description="File overview",
            parse_fn=_parse_description,
            aliases=("fileoverview", "overview"),
        ))
        for tag, kind, description in (
            ("see", NodeKind.SEE, "Reference to related documentation"),
            ("summary", NodeKind.SUMMARY, "Short summary"),
            ("example", NodeKind.EXAMPLE, "Usage example"),
        ):
            self.register(TagRule(tag=tag, kind=kind, description=description, parse_fn=_parse_text))

        for tag, kind, aliases, description in DECLARATIONS:
            self.register(TagRule(
                tag=tag,
                kind=kind,
                description=description,
                parse_fn=_parse_declaration,
                aliases=aliases,
            ))

        for tag, kind, aliases in MARKERS:
            self.register(TagRule(
                tag=tag,
                kind=kind,
                description="Marker",
                parse_fn=_parse_marker,
                aliases=aliases,
            ))


DEFAULT_GRAMMAR = TagGrammar()
