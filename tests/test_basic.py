# tests/test_basic.py
"""
Minimal starter tests for the Group Division backend.
- Test FastAPI endpoints (health, generate, validate)
- Test domain logic (partition)
"""

import random

from fastapi import status
from fastapi.testclient import TestClient

from main import app
from groupmaker.domain.grouping import partition

client = TestClient(app)

# ------------------------
# Domain Logic Test
# ------------------------

def test_partition_basic():
    groups = partition(["1", "2", "3", "4", "5"], 2, rng=random.Random(0))
    # Expected sizes: [2,2,1]
    assert [len(g.members) for g in groups] == [2, 2, 1]

# ------------------------
# FastAPI Endpoint Tests
# ------------------------

def test_index():
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"

def test_generate_groups():
    response = client.post("/api/v1/groups/generate", json={
        "names": ["A", "B", "C", "D", "E", "F"],
        "group_size": 3,
        "together": [["A", "B"]],
        "exceptions": [["A", "C"]],
        "seed": 3,
    })
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [g["label"] for g in data["groups"]] == ["Group 1", "Group 2"]
    home = {m: g["label"] for g in data["groups"] for m in g["members"]}
    assert home["A"] == home["B"]
    assert home["A"] != home["C"]
    assert data["warnings"] == []

def test_generate_infeasible_returns_422():
    response = client.post("/api/v1/groups/generate", json={
        "names": ["A", "B", "C", "D"],
        "group_size": 2,
        "together": [["A", "B"], ["B", "C"]],
    })
    assert response.status_code == 422
    assert "3 people must be together" in response.json()["detail"]

def test_generate_precondition_returns_400():
    response = client.post("/api/v1/groups/generate", json={"names": ["A", "A", "B"], "group_size": 2})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "Duplicate" in response.json()["detail"]

def test_validate_endpoint():
    response = client.post("/api/v1/groups/validate", json={
        "names": ["A", "B", "C"],
        "group_size": 2,
        "together": [["A", "B"], ["B", "C"]],
    })
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["valid"] is False
    assert data["largest_component"] == 3
