"""Unit tests for ScaffoldRequest and build_request (scaffoldkit.request)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from scaffoldkit.request import RequestError, ScaffoldRequest, build_request

pytestmark = pytest.mark.unit


class TestBuildRequest:
    def test_valid(self):
        req = build_request("./apps", "myapp", "react")
        assert req.target_path == "./apps"
        assert req.project_name == "myapp"
        assert req.template_id == "react"
        assert req.in_place is False

    def test_template_defaults_to_react(self):
        assert build_request("./apps", "myapp").template_id == "react"
        assert build_request("./apps", "myapp", None).template_id == "react"

    def test_dot_means_in_place(self):
        assert build_request("/srv/app", ".").in_place is True

    @pytest.mark.parametrize(
        "path, name",
        [(None, "myapp"), ("./apps", None), (None, None), ("", "myapp"), ("./apps", "")],
    )
    def test_missing_flags(self, path, name):
        with pytest.raises(RequestError, match="--path OR --name is not defined"):
            build_request(path, name)

    def test_home_shorthand_rejected(self):
        with pytest.raises(RequestError, match="relative or absolute path"):
            build_request("~/projects", "myapp")

    def test_missing_checked_before_home_shorthand(self):
        with pytest.raises(RequestError, match="is not defined"):
            build_request("~/projects", None)

    def test_unknown_template_is_not_rejected_here(self):
        # Template lookup belongs to the registry.
        assert build_request("./apps", "myapp", "vue").template_id == "vue"

    def test_tilde_inside_path_allowed(self):
        assert build_request("./a~b", "myapp").target_path == "./a~b"


class TestScaffoldRequestModel:
    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldRequest(target_path="./apps", project_name="")

    def test_default_template(self):
        assert ScaffoldRequest(target_path="./apps", project_name="x").template_id == "react"
