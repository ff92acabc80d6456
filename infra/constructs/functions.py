from aws_cdk import Duration
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.layers import RUNTIME

SERVICE_NAME = "villa-booking"


class Functions(Construct):
    """Lambda 関数を管理する Construct

    API はすべて1つの関数で受け、関数内のリゾルバでルーティングする。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        common_layer: _lambda.LayerVersion,
        sender_email: str | None = None,
    ) -> None:
        super().__init__(scope, id)

        environment = {
            "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
            "POWERTOOLS_LOG_LEVEL": "INFO",
        }
        # 未設定の場合、確定メールはログ出力のみ
        if sender_email:
            environment["SENDER_EMAIL"] = sender_email

        self.api_handler = _lambda.Function(
            self,
            "ApiHandlerLambda",
            runtime=RUNTIME,
            handler="villa.api.app.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(15),
            memory_size=256,
            environment=environment,
        )

        if sender_email:
            self.api_handler.add_to_role_policy(
                iam.PolicyStatement(
                    actions=["ses:SendEmail", "ses:SendRawEmail"],
                    resources=["*"],
                )
            )
