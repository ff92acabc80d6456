from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        api_handler: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "VillaRestApi",
            rest_api_name="Villa Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
            ),
        )

        # ANY /api/{proxy+} -> Lambda (APIGatewayRestResolver でルーティング)
        api_resource = self.rest_api.root.add_resource("api")
        api_resource.add_proxy(
            default_integration=apigw.LambdaIntegration(api_handler),
            any_method=True,
        )
