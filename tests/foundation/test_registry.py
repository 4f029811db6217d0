from wscmoead.foundation.exceptions import InvalidOperatorError
from wscmoead.foundation.registry import Registry, suggest_names
import pytest

def test_registry_basic():
    reg = Registry[int]("TestReg")
    reg.register("foo", 1)
    assert "foo" in reg
    assert reg.get("foo") == 1
    assert reg["foo"] == 1
    assert reg.list() == ["foo"]
    assert len(reg) == 1

def test_registry_decorator():
    reg = Registry[type]("Classes")

    @reg.register("my_class")
    class MyClass:
        pass

    assert "my_class" in reg
    assert reg.get("my_class") is MyClass

def test_registry_duplicate_error():
    reg = Registry[int]()
    reg.register("a", 1)
    with pytest.raises(ValueError, match="already exists"):
        reg.register("a", 2)

def test_registry_override():
    reg = Registry[int]()
    reg.register("a", 1)
    reg.register("a", 2, override=True)
    assert reg.get("a") == 2

def test_registry_get_default():
    reg = Registry[int]()
    assert reg.get("missing", 99) == 99
    with pytest.raises(InvalidOperatorError):
        reg.get("missing")

def test_registry_unknown_name_suggests_close_match():
    reg = Registry[int]("mutation operator")
    reg.register("indirect", 1)
    reg.register("graph", 2)
    with pytest.raises(InvalidOperatorError) as excinfo:
        reg.get("indirekt")
    assert "indirect" in str(excinfo.value)
    assert excinfo.value.details["operator_type"] == "mutation operator"

def test_registry_unregister():
    reg = Registry[int]()
    reg.register("a", 1)
    reg.unregister("a")
    assert "a" not in reg
    reg.unregister("a")

def test_suggest_names_is_case_insensitive():
    assert suggest_names("Generations", ["generations", "other"]) == ["generations"]
    assert suggest_names("", ["generations"]) == []
