#!/usr/bin/env python3

import aws_cdk as cdk

from villa_booking_stack import VillaBookingStack

app = cdk.App()
VillaBookingStack(
    app,
    "VillaBookingStack",
    # cdk deploy -c sender_email=bookings@example.com
    sender_email=app.node.try_get_context("sender_email"),
)

app.synth()
