import aws_cdk as core
import aws_cdk.assertions as assertions
import pytest

from villa_booking_stack import VillaBookingStack


def _template(**kwargs) -> assertions.Template:
    # レイヤーのバンドリング (pip install) はテストでは行わない
    app = core.App(context={"aws:cdk:bundling-stacks": []})
    stack = VillaBookingStack(app, "VillaBookingStack", **kwargs)
    return assertions.Template.from_stack(stack)


@pytest.fixture(scope="module")
def template() -> assertions.Template:
    return _template(sender_email="bookings@luxestay.com")


def test_single_api_function(template):
    template.resource_count_is("AWS::Lambda::Function", 1)
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "villa.api.app.lambda_handler",
            "Environment": {
                "Variables": {
                    "POWERTOOLS_SERVICE_NAME": "villa-booking",
                    "SENDER_EMAIL": "bookings@luxestay.com",
                }
            },
        },
    )


def test_api_proxies_every_api_path(template):
    template.has_resource_properties(
        "AWS::ApiGateway::Resource", {"PathPart": "{proxy+}"}
    )
    template.has_resource_properties(
        "AWS::ApiGateway::Method", {"HttpMethod": "ANY"}
    )


def test_function_can_send_email(template):
    template.has_resource_properties(
        "AWS::IAM::Policy",
        {
            "PolicyDocument": {
                "Statement": assertions.Match.array_with(
                    [
                        assertions.Match.object_like(
                            {"Action": ["ses:SendEmail", "ses:SendRawEmail"]}
                        )
                    ]
                )
            }
        },
    )


def test_no_ses_permission_without_sender():
    template = _template()

    template.resource_count_is("AWS::IAM::Policy", 0)
