from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Functions, Layers


class VillaBookingStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        sender_email: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            common_layer=layers.common_layer,
            sender_email=sender_email,
        )

        api = Api(self, "Api", api_handler=fns.api_handler)

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
