"""Pytest configuration and fixtures for tmplscope tests."""

import pytest

from tmplscope import AliasTable, AnalysisConfig, IntrospectionWalker
from tmplscope.nodes import (
    Block,
    Extends,
    Forloop,
    Ident,
    If,
    Include,
    Text,
    VariableBlock,
)


@pytest.fixture
def aliases():
    """Create an empty strict AliasTable."""
    return AliasTable()


@pytest.fixture
def lenient_aliases():
    """Create an AliasTable that breaks cycles instead of raising."""
    return AliasTable(config=AnalysisConfig(strict_aliases=False))


@pytest.fixture
def walker():
    """Create an IntrospectionWalker with default configuration."""
    return IntrospectionWalker()


@pytest.fixture
def table_template():
    """AST of a table view that extends a layout and nests two loops.

    Equivalent source::

        {% extends "layouts/main" %}
        {% block content %}
          {% if config.edit_title %}<h1>{{ config.edit_title }}</h1>{% endif %}
          {% include "partials/table" %}
          {% for name in data.names %}<th>{{ name }}</th>{% endfor %}
          {% for item in data.items %}
            <tr{% if loop.first %} class="first"{% endif %}>
              <td>{{ item.col }}</td>
              {% for value in item.values %}<td>{{ value.abc }}</td>{% endfor %}
              <a href="{{ config.edit_get }}">edit</a>
            </tr>
          {% endfor %}
        {% endblock %}
    """
    return [
        Extends("layouts/main"),
        Block(
            "content",
            [
                If([(Ident("config.edit_title"), [VariableBlock(Ident("config.edit_title"))])]),
                Include(["partials/table"]),
                Forloop(
                    "name",
                    Ident("data.names"),
                    [Text("<th>"), VariableBlock(Ident("name")), Text("</th>")],
                ),
                Forloop(
                    "item",
                    Ident("data.items"),
                    [
                        If([(Ident("loop.first"), [Text(' class="first"')])]),
                        VariableBlock(Ident("item.col")),
                        Forloop("value", Ident("item.values"), [VariableBlock(Ident("value.abc"))]),
                        VariableBlock(Ident("config.edit_get")),
                    ],
                ),
            ],
        ),
    ]
