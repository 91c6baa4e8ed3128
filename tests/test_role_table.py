import pytest
import yaml

from app.config.permissions_config import PERMISSION_MATRIX, RESOURCES, ROLE_PERMISSIONS
from app.modules.rbac.loader import RoleTableError, dump_role_table, load_role_table
from app.modules.rbac.models import Permission, Role, RolePermissionTable


def test_table_values_are_frozen(table):
    assert isinstance(table["ROLE_ADMIN"], frozenset)
    with pytest.raises(TypeError):
        table["ROLE_USER"] = frozenset()


def test_table_is_detached_from_its_source():
    source = {"ROLE_USER": ["USER_READ"]}
    table = RolePermissionTable(source)
    source["ROLE_USER"].append("USER_DELETE")
    source["ROLE_ADMIN"] = ["USER_DELETE"]

    assert table["ROLE_USER"] == frozenset({"USER_READ"})
    assert "ROLE_ADMIN" not in table


def test_missing_role_lookup(table):
    assert table.permissions_for("ROLE_GUEST") == frozenset()
    assert "ROLE_GUEST" not in table
    assert 42 not in table
    with pytest.raises(KeyError):
        table["ROLE_GUEST"]


def test_version_ignores_ordering():
    first = RolePermissionTable({"ROLE_A": ["X", "Y"], "ROLE_B": ["Z"]})
    second = RolePermissionTable({"ROLE_B": ["Z"], "ROLE_A": ["Y", "X", "X"]})
    changed = RolePermissionTable({"ROLE_A": ["X"], "ROLE_B": ["Z"]})

    assert first.version == second.version
    assert first.version != changed.version


def test_config_matches_enums():
    assert set(ROLE_PERMISSIONS) == {r.value for r in Role}
    catalog = {p["name"] for p in PERMISSION_MATRIX["permissions"]}
    assert catalog == {p.value for p in Permission}
    for permissions in ROLE_PERMISSIONS.values():
        assert set(permissions) <= catalog


def test_permission_matrix_shape():
    names = [p["name"] for p in PERMISSION_MATRIX["permissions"]]
    assert len(names) == len(set(names)) == 22
    assert {p["resource"] for p in PERMISSION_MATRIX["permissions"]} == set(RESOURCES)

    assign = next(p for p in PERMISSION_MATRIX["permissions"] if p["name"] == "TASK_ASSIGN")
    assert assign["resource"] == "tasks"
    assert assign["description"] == "Assign or reassign task owners"

    user_role = next(r for r in PERMISSION_MATRIX["roles"] if r["name"] == "ROLE_USER")
    assert user_role["permissions"] == sorted(user_role["permissions"])


def test_dump_and_load(table, tmp_path):
    path = dump_role_table(table, tmp_path / "nested" / "permissions.yml")
    loaded = load_role_table(path)

    assert loaded.to_dict() == table.to_dict()
    assert loaded.version == table.version


def test_load_accepts_empty_role(tmp_path):
    path = tmp_path / "permissions.yml"
    path.write_text("rbac:\n  roles:\n    ROLE_USER:\n    ROLE_DEVELOPER: [TASK_READ]\n")

    loaded = load_role_table(path)

    assert loaded["ROLE_USER"] == frozenset()
    assert loaded["ROLE_DEVELOPER"] == frozenset({"TASK_READ"})


def test_load_warns_on_stale_version(table, tmp_path, caplog):
    path = tmp_path / "permissions.yml"
    path.write_text(yaml.safe_dump({"rbac": {"version": "stale", "roles": table.to_dict()}}))

    loaded = load_role_table(path)

    assert loaded.version == table.version
    assert "declares version stale" in caplog.text


@pytest.mark.parametrize("content", [
    "- just\n- a list\n",
    "roles:\n  ROLE_USER: [USER_READ]\n",
    "rbac:\n  roles: [ROLE_USER]\n",
    "rbac:\n  roles:\n    ROLE_USER: USER_READ\n",
    "rbac:\n  roles:\n    ROLE_USER: [1, 2]\n",
    "rbac: [unclosed\n",
])
def test_load_rejects_malformed_files(tmp_path, content):
    path = tmp_path / "permissions.yml"
    path.write_text(content)

    with pytest.raises(RoleTableError):
        load_role_table(path)
