import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

RUNTIME = _lambda.Runtime.PYTHON_3_13


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """Docker を使わずにローカルで依存ライブラリをインストールする Bundling

    uv -> pip の順に試し、どちらも使えなければ Docker にフォールバックする。
    """

    def __init__(self, source_path: str, requirements: str = "requirements.txt"):
        self.source_path = source_path
        self.requirements = requirements

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する

        Returns:
            True: 成功（Docker バンドリングをスキップ）
            False: 失敗（Docker にフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / self.requirements
        if not requirements_path.exists():
            logger.warning("requirements file not found: %s", requirements_path)
            return False

        target_dir = str(Path(output_dir) / "python")
        for installer in self._install_commands(str(requirements_path), target_dir):
            if self._run(installer):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    @staticmethod
    def _install_commands(requirements: str, target_dir: str) -> list[list[str]]:
        return [
            ["uv", "pip", "install", "-r", requirements]
            + ["--target", target_dir, "--quiet"],
            ["pip", "install", "-r", requirements, "-t", target_dir, "--quiet"],
        ]

    @staticmethod
    def _run(command: list[str]) -> bool:
        tool = command[0]
        try:
            logger.info("Trying local bundling with %s...", tool)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", tool)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", tool, e)
            return False

        logger.info("Local bundling with %s succeeded", tool)
        return True


class Layers(Construct):
    """Lambda Layers Construct"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        layer_source_path = "layers/common_layer"

        # Powertools と pydantic をまとめた共通レイヤー（boto3 はランタイム同梱のものを使う）
        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                layer_source_path,
                bundling=BundlingOptions(
                    image=RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(layer_source_path),
                ),
            ),
            compatible_runtimes=[RUNTIME],
            description="Villa booking API dependencies",
        )
