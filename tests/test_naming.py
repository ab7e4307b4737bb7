import pytest

from logregistry.naming import shorten_qualified_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("com.example.Foo", "c.e.Foo"),
        ("logregistry.registry.LogRegistry", "l.r.LogRegistry"),
        ("Foo", "Foo"),
        ("", ""),
        ("com..example.Foo", "c.e.Foo"),
    ],
)
def test_shorten_qualified_name(name, expected):
    assert shorten_qualified_name(name) == expected
