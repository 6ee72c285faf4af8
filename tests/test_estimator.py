import numpy as np
import pytest
from sklearn.base import clone
from entropytree import EntropyTree
from entropytree.datasets import load_blobs, load_iris_table

BLOBS_ROOT = "X[0] < 5.3017 (gain=1.0000, n=10)"


def _pure_table():
    """Return a table where every row has the same label."""
    return np.column_stack([np.arange(12.0), np.zeros(12)])


def test_fit_table_with_label_column():
    model = EntropyTree(label_index=2).fit(load_blobs())
    assert model.label_index_ == 2
    assert model.n_features_in_ == 3
    assert model.get_n_nodes() == 1
    assert model.get_depth() == 1
    assert model.render() == "\n".join([BLOBS_ROOT, "  L: <none>", "  R: <none>"])


def test_fit_X_y_matches_table():
    table = load_blobs()
    a = EntropyTree(label_index=2).fit(table)
    b = EntropyTree().fit(table[:, :2], table[:, 2])
    assert a.export_dict() == b.export_dict()


def test_fit_X_y_length_mismatch():
    with pytest.raises(ValueError):
        EntropyTree().fit(np.zeros((4, 2)), np.zeros(3))


def test_feature_names_in_render():
    model = EntropyTree(label_index=2, feature_names=["x", "y", "label"]).fit(load_blobs())
    assert model.render().startswith("x < 5.3017")
    assert model.render(feature_names=["a", "b", "c"]).startswith("a < 5.3017")


def test_feature_names_length_checked():
    with pytest.raises(ValueError):
        EntropyTree(label_index=2, feature_names=["x"]).fit(load_blobs())


def test_export_rules():
    model = EntropyTree(label_index=2).fit(load_blobs())
    assert model.export_rules() == ["X[0] < 5.3017 => <none>", "X[0] >= 5.3017 => <none>"]
    model = EntropyTree(label_index=2, keep_leaves=True).fit(load_blobs())
    assert model.export_rules() == ["X[0] < 5.3017 => label=0 (n=5)",
                                    "X[0] >= 5.3017 => label=1 (n=5)"]


def test_keep_leaves_render():
    model = EntropyTree(label_index=2, keep_leaves=True).fit(load_blobs())
    lines = model.render().splitlines()
    assert lines[1] == "  L: Leaf(label=0, n=5, reason=min_samples)"
    assert lines[2] == "  R: Leaf(label=1, n=5, reason=min_samples)"


def test_no_split_at_root():
    model = EntropyTree().fit(_pure_table())
    assert model.tree_ is None
    assert model.render() == "<none>"
    assert model.export_rules() == ["<root> => <none>"]
    assert model.export_dict() is None
    assert model.get_depth() == 0
    assert model.get_n_nodes() == 0


def test_iris_render_is_nested():
    model = EntropyTree(label_index=4).fit(load_iris_table())
    lines = model.render().splitlines()
    assert lines[0].startswith(("X[2] <", "X[3] <"))
    assert any(line.startswith("    ") for line in lines)
    assert len(model.export_rules()) == model.get_n_nodes() + 1


def test_print_tree(capsys):
    EntropyTree(label_index=2).fit(load_blobs()).print_tree()
    out = capsys.readouterr().out
    assert out.splitlines()[0] == BLOBS_ROOT


def test_not_fitted_raises():
    model = EntropyTree()
    with pytest.raises(ValueError):
        model.render()
    with pytest.raises(ValueError):
        model.get_depth()
    with pytest.raises(ValueError):
        model.export_rules()


def test_params_and_clone():
    model = EntropyTree(label_index=4, min_samples=10, keep_leaves=True)
    params = model.get_params()
    assert params["label_index"] == 4
    assert params["min_samples"] == 10
    copy = clone(model)
    assert copy.get_params() == params
    assert not hasattr(copy, "tree_")


def test_graphviz_export(tmp_path):
    pytest.importorskip("graphviz")
    model = EntropyTree(label_index=2).fit(load_blobs())
    source = model.export_graphviz()
    assert "X[0] < 5.3017" in source
    out_path = model.export_graphviz(str(tmp_path / "blobs"), format="dot")
    assert out_path.endswith(".dot")
    assert (tmp_path / "blobs.dot").exists()
