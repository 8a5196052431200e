"""Token derivation for the netbox package.

Tokens have the shape `<package>:<module path>:<name>`. Resources and data
sources get a module path of `<module>/<name with a lower-cased first
letter>`, which is also the file name SDK generators emit for the entry.
Generators rely on bit-identical output, so nothing here may change the
name beyond its first character.
"""

from __future__ import annotations

from dataclasses import dataclass

from nbmap.core.errors import MalformedNameError

PACKAGE = "netbox"
INDEX_MODULE = "index"


@dataclass(frozen=True)
class TokenParts:
    """A token split back into its three segments."""

    package: str
    module_path: str
    name: str

    @property
    def module(self) -> str:
        """Return the module part of the module path (before any `/`)."""
        return self.module_path.split("/", 1)[0]


def lower_first(name: str) -> str:
    """
    Lower-case the first character of `name` and keep the rest verbatim.

    Raises:
        MalformedNameError: If `name` is empty, does not start with a letter,
            or starts with a letter whose lower case is not one character.
    """
    if not name:
        raise MalformedNameError(name, "name is empty")
    if not name[0].isalpha():
        raise MalformedNameError(name)
    first = name[0].lower()
    if len(first) != 1:
        raise MalformedNameError(name, "first letter has no single-character lower case")
    return first + name[1:]


def member_token(module: str, member: str, package: str = PACKAGE) -> str:
    """Build a module member token for the package."""
    return f"{package}:{module}:{member}"


def type_token(module: str, type_name: str, package: str = PACKAGE) -> str:
    """Build a type token for the package."""
    return member_token(module, type_name, package)


def resource_token(module: str, name: str, package: str = PACKAGE) -> str:
    """Build the standard token for a resource in `module`."""
    return type_token(f"{module}/{lower_first(name)}", name, package)


def data_source_token(module: str, name: str, package: str = PACKAGE) -> str:
    """Build the standard token for a data source (function) in `module`."""
    return member_token(f"{module}/{lower_first(name)}", name, package)


def split_token(token: str) -> TokenParts:
    """Split a token into package, module path and name."""
    parts = token.split(":")
    if len(parts) != 3 or not all(parts):
        raise MalformedNameError(token, "expected <package>:<module>:<name>")
    return TokenParts(*parts)
