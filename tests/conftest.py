"""Test fixtures and configuration."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Add the project root directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))


@pytest.fixture
def sample_plan() -> dict[str, Any]:
    """Create a small plan state with resources, modules, and variables."""
    return {
        "format_version": "1.0",
        "variables": {
            "region": {"value": "eu-central-1"},
        },
        "planned_values": {
            "root_module": {
                "resources": [
                    {
                        "address": "aws_instance.web",
                        "mode": "managed",
                        "type": "aws_instance",
                        "name": "web",
                        "provider_name": "registry.terraform.io/hashicorp/aws",
                        "values": {
                            "ami": "ami-0123456789",
                            "instance_type": "t3.micro",
                            "tags": {"Owner": "jane@example.com"},
                            "tags_all": {"Owner": "jane@example.com"},
                            "monitoring": False,
                            "cpu_core_count": 2,
                        },
                    }
                ]
            }
        },
        "configuration": {
            "provider_config": {
                "aws": {
                    "name": "aws",
                    "expressions": {
                        "region": {"references": ["var.region"]},
                    },
                }
            },
            "root_module": {
                "module_calls": {
                    "vpc": {
                        "source": "git::https://example.com/private/vpc.git",
                        "expressions": {
                            "cidr": {"constant_value": "10.0.0.0/16"},
                        },
                    }
                },
            },
        },
    }


@pytest.fixture
def plan_file(tmp_path: Path, sample_plan: dict[str, Any]) -> Path:  # pylint: disable=redefined-outer-name
    """Write the sample plan state into a temporary working directory."""
    path = tmp_path / "pluralith.state.stripped"
    path.write_text(json.dumps(sample_plan), encoding="utf-8")
    return path
