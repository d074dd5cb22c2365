# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

LATEST_DEPLOYMENT = dedent(
    """
    apiVersion: apps/v1
    kind: Deployment
    metadata:
      name: web
      namespace: shop
    spec:
      template:
        spec:
          containers:
            - name: app
              image: nginx:latest
              securityContext:
                runAsNonRoot: true
                readOnlyRootFilesystem: true
              resources:
                requests: {cpu: 100m, memory: 64Mi}
                limits: {cpu: 200m, memory: 128Mi}
    """,
).lstrip()

CLEAN_DEPLOYMENT = LATEST_DEPLOYMENT.replace("nginx:latest", "nginx:1.25.3")

SERVICE = dedent(
    """
    apiVersion: v1
    kind: Service
    metadata:
      name: web
    spec:
      ports:
        - port: 80
    """,
).lstrip()


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Return a helper writing ``text`` to ``tmp_path / name``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def latest_manifest(write_manifest) -> Path:
    """Return a file holding a deployment that trips only ``latest-tag``."""
    return write_manifest("manifests/deploy.yaml", LATEST_DEPLOYMENT)


@pytest.fixture
def clean_manifest(write_manifest) -> Path:
    """Return a file holding a deployment no default check flags."""
    return write_manifest("manifests/clean.yaml", CLEAN_DEPLOYMENT)


@pytest.fixture
def service_manifest(write_manifest) -> Path:
    """Return a file holding a service, which no default check covers."""
    return write_manifest("manifests/service.yaml", SERVICE)


@pytest.fixture
def latest_deployment_yaml() -> str:
    return LATEST_DEPLOYMENT


@pytest.fixture
def clean_deployment_yaml() -> str:
    return CLEAN_DEPLOYMENT
