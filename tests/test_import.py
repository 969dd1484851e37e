"""Verify package imports work correctly."""


def test_import_pluma() -> None:
    """Test that pluma can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import pluma

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert pluma.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from pluma import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_exports_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import pluma

    for name in pluma.__all__:
        assert hasattr(pluma, name), name
