import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from infra.constructs.layers import PythonLocalBundling


@pytest.fixture
def layer_source(tmp_path: Path):
    """requirements.txt を含むレイヤーソースを生成する Factory fixture"""

    def _factory(requirements: str | None = "aws-lambda-powertools>=3.0.0\n") -> Path:
        source_path = tmp_path / "common_layer"
        source_path.mkdir()
        if requirements is not None:
            (source_path / "requirements.txt").write_text(requirements)
        return source_path

    return _factory


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "output"
    path.mkdir()
    return path


class TestPythonLocalBundling:
    def test_uv_is_tried_first(self, layer_source, output_dir):
        bundling = PythonLocalBundling(str(layer_source()))

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)

            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is True
        mock_run.assert_called_once()
        command = mock_run.call_args[0][0]
        assert command[:3] == ["uv", "pip", "install"]
        assert str(output_dir / "python") in command

    def test_falls_back_to_pip_when_uv_is_missing(self, layer_source, output_dir):
        bundling = PythonLocalBundling(str(layer_source()))

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [
                FileNotFoundError("uv not found"),
                MagicMock(returncode=0),
            ]

            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is True
        assert mock_run.call_count == 2
        assert mock_run.call_args_list[1][0][0][0] == "pip"

    def test_missing_requirements_falls_back_to_docker(self, layer_source, output_dir):
        bundling = PythonLocalBundling(str(layer_source(requirements=None)))

        with patch("subprocess.run") as mock_run:
            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is False
        mock_run.assert_not_called()

    def test_both_installers_failing_falls_back_to_docker(
        self, layer_source, output_dir
    ):
        bundling = PythonLocalBundling(str(layer_source()))

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [
                subprocess.CalledProcessError(1, "uv"),
                FileNotFoundError("pip not found"),
            ]

            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is False
        assert mock_run.call_count == 2
