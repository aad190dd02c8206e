"""
Tests for the local assessment API.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.schemas.hardware import HardwareInventory, RamInfo, GpuInfo

client = TestClient(app)

WORKSTATION = {
    "cpu": {"cores": 16, "logical_processors": 32, "max_clock_ghz": 4.2},
    "ram": {"total_gb": 64},
    "gpus": [{"name": "NVIDIA RTX 4090", "vram_gb": 24}],
    "disk": {"free_gb": 120, "total_gb": 500},
}


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_assess_workstation():
    response = client.post("/v1/assessment", json=WORKSTATION)
    assert response.status_code == 200
    data = response.json()
    assert data["scores"] == {"cpu_score": 25, "ram_score": 25, "gpu_score": 40, "disk_score": 10, "total": 100}
    assert data["rating_band"] == "EXCELLENT"
    assert data["compatibility"]["supported_tier"] == "full"


def test_assess_empty_inventory():
    response = client.post("/v1/assessment", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["scores"]["total"] == 0
    assert data["rating_band"] == "POOR"
    assert data["compatibility"]["cpu_only"] is True
    assert data["missing_categories"] == ["cpu", "ram", "gpu", "disk"]


def test_negative_values_rejected():
    body = {"gpus": [{"name": "RTX 3080", "vram_gb": -10}]}
    response = client.post("/v1/assessment", json=body)
    assert response.status_code == 422
    assert "gpu.vram_gb" in response.json()["detail"]


def test_wrong_types_rejected():
    response = client.post("/v1/assessment", json={"ram": {"total_gb": "lots"}})
    assert response.status_code == 422


@pytest.mark.parametrize("body", [
    {"cpu": {"cores": True, "logical_processors": True, "max_clock_ghz": True}},
    {"cpu": {"cores": 8, "logical_processors": 16, "max_clock_ghz": True}},
    {"ram": {"total_gb": True}},
    {"gpus": [{"name": "RTX 3060", "vram_gb": False}]},
    {"disk": {"free_gb": True}},
])
def test_boolean_numbers_rejected(body):
    response = client.post("/v1/assessment", json=body)
    assert response.status_code == 422


def test_integer_sizes_accepted():
    body = {"cpu": {"cores": 8, "logical_processors": 16, "max_clock_ghz": 4}, "ram": {"total_gb": 32}}
    response = client.post("/v1/assessment", json=body)
    assert response.status_code == 200
    assert response.json()["scores"]["ram_score"] == 20


@patch("src.services.assessment_service.SystemService.scan_inventory")
def test_assess_this_system(mock_scan):
    mock_scan.return_value = HardwareInventory(
        ram=RamInfo(total_gb=16),
        gpus=(GpuInfo(name="NVIDIA GeForce RTX 3060", vram_gb=12),),
    )
    response = client.get("/v1/system/assessment")
    assert response.status_code == 200
    data = response.json()
    assert data["gpu_count"] == 1
    assert data["missing_categories"] == ["cpu", "disk"]
    assert data["assessment"]["scores"]["gpu_score"] == 27
