import importlib

import algsgraph


def test_package_metadata():
    assert isinstance(algsgraph.__version__, str) and algsgraph.__version__
    assert isinstance(algsgraph.__author__, str) and algsgraph.__author__


def test_public_names_importable():
    for name in algsgraph.__all__:
        assert hasattr(algsgraph, name), f"algsgraph.{name} missing"


def test_subpackages_importable():
    for module in ("algsgraph.core", "algsgraph.classes"):
        mod = importlib.import_module(module)
        assert mod.__all__, f"{module} exports nothing"
