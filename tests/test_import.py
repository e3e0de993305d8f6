"""Verify package imports work correctly."""


def test_import_cfmlfmt() -> None:
    """Test that cfmlfmt can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import cfmlfmt

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert cfmlfmt.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from cfmlfmt import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    import cfmlfmt

    for name in cfmlfmt.__all__:
        assert hasattr(cfmlfmt, name), name
