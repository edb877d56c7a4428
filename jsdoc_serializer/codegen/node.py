"""AST node model for documentation-comment blocks."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jsdoc_serializer.codegen.schemas import Attributes, NoAttributes


class NodeKind(Enum):
    """Kind of AST node. Values are the names used in serialized output."""

    START = "StartDeclaration"
    END = "EndDeclaration"
    WHITESPACE = "WhitespaceDeclaration"
    DESCRIPTION = "DescriptionDeclaration"

    ABSTRACT = "AbstractDeclaration"
    ACCESS = "AccessDeclaration"
    ALIAS = "AliasDeclaration"
    ASYNC = "AsyncDeclaration"
    AUGMENTS = "AugmentsDeclaration"
    AUTHOR = "AuthorDeclaration"
    BORROWS = "BorrowsDeclaration"
    CALLBACK = "CallbackDeclaration"
    CLASS = "ClassDeclaration"
    CLASS_DESCRIPTION = "ClassDescriptionDeclaration"
    CONSTANT = "ConstantDeclaration"
    CONSTRUCTS = "ConstructDeclaration"
    COPYRIGHT = "CopyrightDeclaration"
    DEPRECATED = "DeprecatedDeclaration"
    ENUM = "EnumDeclaration"
    EVENT = "EventDeclaration"
    EXAMPLE = "ExampleDeclaration"
    EXPORTS = "ExportsDeclaration"
    EXTERNAL = "ExternalDeclaration"
    FILE = "FileDeclaration"
    FIRES = "FireDeclaration"
    FUNCTION = "FunctionDeclaration"
    GENERATOR = "GeneratorDeclaration"
    GLOBAL = "GlobalDeclaration"
    HIDE_CONSTRUCTOR = "HideConstructorDeclaration"
    IGNORE = "IgnoreDeclaration"
    IMPLEMENTS = "ImplementsDeclaration"
    INHERIT_DOC = "InheritDocDeclaration"
    INNER = "InnerDeclaration"
    INSTANCE = "InstanceDeclaration"
    INTERFACE = "InterfaceDeclaration"
    KIND = "KindDeclaration"
    LENDS = "LendsDeclaration"
    LICENSE = "LicenseDeclaration"
    LISTENS = "ListenDeclaration"
    MEMBER = "MemberDeclaration"
    MEMBER_OF = "MemberOfDeclaration"
    MIXES = "MixesDeclaration"
    MIXIN = "MixinDeclaration"
    MODULE = "ModuleDeclaration"
    NAME = "NameDeclaration"
    NAMESPACE = "NamespaceDeclaration"
    OVERRIDE = "OverrideDeclaration"
    PACKAGE = "PackageDeclaration"
    PARAM = "ParameterDeclaration"
    PRIVATE = "PrivateDeclaration"
    PROPERTY = "PropertyDeclaration"
    PROTECTED = "ProtectedDeclaration"
    PUBLIC = "PublicDeclaration"
    READONLY = "ReadonlyDeclaration"
    REQUIRES = "RequiresDeclaration"
    RETURN = "ReturnDeclaration"
    SEE = "SeeDeclaration"
    SINCE = "SinceDeclaration"
    STATIC = "StaticDeclaration"
    SUMMARY = "SummaryDeclaration"
    THIS = "ThisDeclaration"
    THROWS = "ThrowsDeclaration"
    TODO = "TodoDeclaration"
    TUTORIAL = "TutorialDeclaration"
    TYPE = "TypeDeclaration"
    TYPEDEF = "TypeDefDeclaration"
    YIELDS = "YieldDeclaration"


@dataclass(eq=False)
class Node:
    """A single AST node.

    A node owns its children and keeps a weak reference to its parent. The
    kind is fixed at construction; the attribute record is frozen.
    """

    kind: NodeKind
    attributes: Attributes = field(default_factory=NoAttributes)
    children: list[Node] = field(default_factory=list)
    _parent_ref: weakref.ReferenceType[Node] | None = field(
        default=None, init=False, repr=False
    )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError("Node.kind is immutable")
        super().__setattr__(name, value)

    @classmethod
    def from_kind(
        cls,
        kind: NodeKind,
        attributes: Attributes | None = None,
        parent: Node | None = None,
    ) -> Node:
        """Create a node and, if given a parent, link it as the last child."""
        node = cls(kind, attributes if attributes is not None else NoAttributes())
        if parent is not None:
            parent.add_child(node)
        return node

    @property
    def parent(self) -> Node | None:
        """The owning node, or None for a root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def add_child(self, child: Node) -> Node:
        """Append ``child`` and point its parent reference here."""
        if child.parent is not None:
            raise ValueError(f"{child} already has a parent")
        if child is self or child in self.get_ancestors():
            raise ValueError(f"Linking {child} under {self} would create a cycle")
        self.children.append(child)
        child._parent_ref = weakref.ref(self)
        return self

    def reparent(self, new_parent: Node | None) -> Node:
        """Move this node under ``new_parent`` (or detach it when None).

        The node is removed from its current parent's children and appended
        last under the new one.
        """
        if new_parent is not None and (new_parent is self or self in new_parent.get_ancestors()):
            raise ValueError(f"Moving {self} under {new_parent} would create a cycle")
        old_parent = self.parent
        if old_parent is not None:
            old_parent.children = [child for child in old_parent.children if child is not self]
        self._parent_ref = None
        if new_parent is not None:
            new_parent.add_child(self)
        return self

    def get_ancestors(self) -> list[Node]:
        """Get all ancestor nodes from root to parent."""
        ancestors = []
        current = self.parent
        while current is not None:
            ancestors.insert(0, current)
            current = current.parent
        return ancestors

    def get_descendants(self) -> list[Node]:
        """Get all descendant nodes (depth-first)."""
        descendants = []
        for child in self.children:
            descendants.append(child)
            descendants.extend(child.get_descendants())
        return descendants

    def find_child(self, kind: NodeKind) -> Node | None:
        """Find the first direct child of the given kind."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert node and its subtree to a dictionary (no parent links)."""
        result: dict[str, Any] = {"type": self.kind.value}
        result.update(self.attributes.to_dict())
        result["children"] = [child.to_dict() for child in self.children]
        return result

    def __str__(self) -> str:
        label = "child" if len(self.children) == 1 else "children"
        return f"[Node<{self.kind.value}> ({len(self.children)} {label})]"
