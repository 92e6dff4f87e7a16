"""
Management command to register C2B URLs or simulate a C2B payment.
"""

from daraja.constants import CommandID, ResponseType
from daraja.types import C2BRegisterURLRequest, C2BSimulateRequest
from daraja.utils.formatters import format_phone_number

from ._base import DarajaCommand


class Command(DarajaCommand):
    help = 'Register C2B confirmation/validation URLs, or simulate a C2B payment'

    def add_request_arguments(self, parser):
        parser.add_argument(
            'mode',
            choices=['register', 'simulate'],
            help='register: set the URLs of a short code; simulate: send a test payment'
        )
        parser.add_argument(
            '--short-code',
            type=str,
            default='600981',
            help='Short code (default: 600981)'
        )

        register = parser.add_argument_group('register')
        register.add_argument(
            '--response-type',
            type=str,
            choices=[t.value for t in ResponseType],
            default=ResponseType.COMPLETED.value,
            help='Action taken when the validation URL cannot be reached'
        )
        register.add_argument(
            '--confirmation-url',
            type=str,
            default='https://example.com/confirmation'
        )
        register.add_argument(
            '--validation-url',
            type=str,
            default='https://example.com/validation'
        )

        simulate = parser.add_argument_group('simulate')
        simulate.add_argument(
            '--command-id',
            type=str,
            choices=[
                CommandID.CUSTOMER_PAY_BILL_ONLINE.value,
                CommandID.CUSTOMER_BUY_GOODS_ONLINE.value,
            ],
            default=CommandID.CUSTOMER_PAY_BILL_ONLINE.value
        )
        simulate.add_argument(
            '--amount',
            type=int,
            default=10
        )
        simulate.add_argument(
            '--phone',
            type=str,
            default='254708374149',
            help='Paying customer (default: 254708374149)'
        )
        simulate.add_argument(
            '--bill-ref-number',
            type=str,
            default='',
            help='Account number for pay bill payments'
        )

    def build_request(self, options):
        if options['mode'] == 'register':
            self.operation_name = 'C2B URL registration'
            return C2BRegisterURLRequest(
                short_code=options['short_code'],
                response_type=options['response_type'],
                confirmation_url=options['confirmation_url'],
                validation_url=options['validation_url'],
            )

        self.operation_name = 'C2B simulation'
        return C2BSimulateRequest(
            command_id=options['command_id'],
            amount=options['amount'],
            msisdn=format_phone_number(options['phone']),
            bill_ref_number=options['bill_ref_number'],
            short_code=options['short_code'],
        )
