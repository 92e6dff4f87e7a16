"""
Management command to send a business to customer (B2C) payment.
"""

from daraja.constants import CommandID
from daraja.types import B2CPaymentRequest
from daraja.utils.formatters import format_phone_number

from ._base import DarajaCommand, add_initiator_arguments, add_result_arguments

B2C_COMMANDS = (
    CommandID.BUSINESS_PAYMENT.value,
    CommandID.SALARY_PAYMENT.value,
    CommandID.PROMOTION_PAYMENT.value,
)


class Command(DarajaCommand):
    help = 'Pay out from a business short code to a customer phone number'
    operation_name = 'B2C payment'

    def add_request_arguments(self, parser):
        add_initiator_arguments(parser)
        parser.add_argument(
            '--phone',
            type=str,
            required=True,
            help='Customer phone number (e.g., 254712345678)'
        )
        parser.add_argument(
            '--amount',
            type=int,
            required=True,
            help='Payout amount'
        )
        parser.add_argument(
            '--short-code',
            type=str,
            default='600996',
            help='Business short code sending the funds (default: 600996)'
        )
        parser.add_argument(
            '--command-id',
            type=str,
            choices=B2C_COMMANDS,
            default=CommandID.BUSINESS_PAYMENT.value
        )
        parser.add_argument(
            '--occasion',
            type=str,
            default='',
            help='Optional extra information'
        )
        parser.add_argument(
            '--conversation-id',
            type=str,
            default='',
            help='Originator conversation ID (auto-generated if not provided)'
        )
        add_result_arguments(parser)

    def build_request(self, options):
        return B2CPaymentRequest(
            initiator_password=options['initiator_password'],
            originator_conversation_id=options['conversation_id'],
            initiator_name=options['initiator_name'],
            command_id=options['command_id'],
            amount=options['amount'],
            party_a=options['short_code'],
            party_b=format_phone_number(options['phone']),
            remarks=options['remarks'],
            queue_timeout_url=options['queue_timeout_url'],
            result_url=options['result_url'],
            occasion=options['occasion'],
        )
