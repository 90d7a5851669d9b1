"""Pytest configuration and fixtures."""

import pytest
import yaml

DOC_STRING_CONTAINS = """
a:
  b: "hello world foo bar"
  c: "multi\\nline\\nstring"
  d: '{"name":"test","nested":{"value":true}}'
  e: |
    some:
      nested: yaml
      format: true
"""

DOC_DEPLOYMENT = """
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  labels:
    app: web
    app.kubernetes.io/name: web
spec:
  replicas: 3
  template:
    spec:
      containers:
        - name: web
          image: nginx:1.25
        - name: sidecar
          image: envoy:1.29
"""


def make_manifest(text: str) -> dict:
    return yaml.safe_load(text)


@pytest.fixture
def manifest():
    return make_manifest(DOC_STRING_CONTAINS)


@pytest.fixture
def deployment():
    return make_manifest(DOC_DEPLOYMENT)
