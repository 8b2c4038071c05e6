import pytest
from fastapi.testclient import TestClient

from gallery.api.main import create_app


pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    return TestClient(create_app())


def _frame(frame_id, x, y, width=20, height=20):
    return {"id": frame_id, "x": x, "y": y, "width": width, "height": height}


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_layout_empty(client):
    r = client.post("/api/layout", json={})
    assert r.status_code == 200
    body = r.json()
    assert body["positions"] == []
    assert body["frame_count"] == 0


def test_layout_with_labels(client):
    state = {
        "frames": [{"id": "a", "width": 20, "height": 20}],
        "h_anchor_type": "left",
        "h_anchor_value": 30,
        "anchor_type": "ceiling",
        "anchor_value": 10,
    }
    r = client.post("/api/layout", json={"state": state, "unit": "in"})
    assert r.status_code == 200
    body = r.json()
    assert body["frame_count"] == 1
    assert body["out_of_bounds_count"] == 0
    assert body["positions"][0]["hook_x"] == 40
    label = body["labels"][0]
    assert label["from_left"] == '40"'
    assert label["from_ceiling"] == '12"'
    assert label["hook_gap"] is None


def test_layout_labels_in_centimeters(client):
    state = {
        "frames": [{"id": "a", "width": 20, "height": 20}],
        "h_anchor_type": "left",
        "h_anchor_value": 30,
    }
    r = client.post("/api/layout", json={"state": state, "unit": "cm"})
    assert r.json()["labels"][0]["from_left"] == "101.6 cm"


def test_layout_counts_out_of_bounds(client):
    state = {
        "wall": {"width": 100, "height": 100},
        "frames": [{"id": "a", "width": 20, "height": 20}],
        "h_anchor_type": "left",
        "h_anchor_value": 90,
    }
    r = client.post("/api/layout", json={"state": state})
    assert r.json()["out_of_bounds_count"] == 1


def test_layout_rejects_invalid_frame(client):
    state = {"frames": [{"id": "a", "width": 0, "height": 20}]}
    r = client.post("/api/layout", json={"state": state})
    assert r.status_code == 422


def test_layout_rejects_dual_hooks_wider_than_frame(client):
    frame = {"id": "a", "width": 5, "height": 20, "hanging_type": "dual", "hook_inset": 3}
    r = client.post("/api/layout", json={"state": {"frames": [frame]}})
    assert r.status_code == 422


def test_snap(client):
    body = {
        "frames": [_frame("a", 10, 10), _frame("b", 60, 60)],
        "frame_id": "b",
        "desired_x": 38,
        "desired_y": 12,
    }
    r = client.post("/api/snap", json=body)
    assert r.status_code == 200
    data = r.json()
    assert (data["x"], data["y"]) == (33, 10)
    assert any(g["type"] == "left" and g["position"] == 33 for g in data["guides"])
    assert data["previews"]["b"] == {"x": 33, "y": 10}


def test_snap_unknown_frame(client):
    body = {"frames": [_frame("a", 0, 0)], "frame_id": "zzz", "desired_x": 0, "desired_y": 0}
    r = client.post("/api/snap", json=body)
    assert r.status_code == 404


def test_commit(client):
    body = {
        "frames": [_frame("a", 40, 40, 10, 10), _frame("b", 60, 20, 10, 10)],
        "frame_id": "a",
        "desired_x": 45,
        "desired_y": 42,
        "selected_ids": ["a", "b"],
        "config": {"settings": {"threshold": 0}},
    }
    r = client.post("/api/drag/commit", json=body)
    assert r.status_code == 200
    frames = r.json()["frames"]
    assert [(f["id"], f["x"], f["y"]) for f in frames] == [("a", 45, 42), ("b", 65, 22)]


def test_templates_and_presets(client):
    templates = client.get("/api/templates").json()
    assert [t["id"] for t in templates][:2] == ["triptych", "staircase"]

    presets = client.get("/api/presets").json()
    assert len(presets) == 6

    r = client.get("/api/presets/varied-trio/state")
    assert r.status_code == 200
    state = r.json()
    assert state["row_mode"] == "manual"
    assert len(state["frames"]) == 3

    assert client.get("/api/presets/missing/state").status_code == 404


def test_strategies(client):
    ids = {s["id"] for s in client.get("/api/strategies").json()}
    assert ids == {"layout.freeform", "layout.template"}
