"""Base class for Apple News components built from HTML."""

import json
from abc import ABC, abstractmethod
from typing import Any

from bs4 import Tag


class Component(ABC):
    """An Apple News component built from one HTML fragment.

    Subclasses register named specs: JSON templates whose string values may
    be tokens such as "#components#". build() fills a spec's tokens through
    register_json(), which sets the component's JSON.
    """

    def __init__(self, html: str):
        self.html = html
        self.specs: dict[str, dict[str, Any]] = {}
        self.json: dict[str, Any] | None = None
        self.register_specs()
        self.build(html)

    @classmethod
    @abstractmethod
    def node_matches(cls, node: Tag) -> bool:
        """Whether this component handles the given HTML node."""
        pass

    @abstractmethod
    def register_specs(self) -> None:
        pass

    @abstractmethod
    def build(self, html: str) -> None:
        pass

    @staticmethod
    def node_has_class(node: Tag, classname: str) -> bool:
        """Check an element's class attribute for a class name."""
        if not isinstance(node, Tag):
            return False
        classes = node.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        return classname in classes

    def register_spec(self, name: str, label: str, spec: dict[str, Any]) -> None:
        """Register a JSON template under a name.

        Args:
            name: Spec name, e.g. 'wp-embed-json'
            label: Human readable label
            spec: Template with token placeholders
        """
        self.specs[name] = {"label": label, "spec": spec}

    def register_json(self, name: str, values: dict[str, Any]) -> None:
        """Fill a registered spec's tokens and use the result as this component's JSON.

        Raises:
            KeyError: If no spec was registered under name
        """
        self.json = _substitute(self.specs[name]["spec"], values)

    def to_array(self) -> dict[str, Any] | None:
        return self.json

    def to_json(self) -> str:
        return json.dumps(self.json)


def _substitute(template: Any, values: dict[str, Any]) -> Any:
    if isinstance(template, dict):
        return {key: _substitute(value, values) for key, value in template.items()}
    if isinstance(template, list):
        return [_substitute(value, values) for value in template]
    if isinstance(template, str) and template in values:
        return values[template]
    return template
