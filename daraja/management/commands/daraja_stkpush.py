"""
Management command to send or query an M-Pesa Express (STK push) payment.
"""

from django.core.management.base import CommandError

from daraja.constants import TransactionType
from daraja.types import ExpressQueryRequest, ExpressSimulateRequest
from daraja.utils.formatters import format_phone_number

from ._base import DarajaCommand


class Command(DarajaCommand):
    help = 'Send an STK push payment prompt, or query one with --query'
    operation_name = 'STK push'

    def add_request_arguments(self, parser):
        parser.add_argument(
            '--pass-key',
            type=str,
            required=True,
            help='Lipa na M-Pesa Online pass key'
        )
        parser.add_argument(
            '--short-code',
            type=str,
            default='174379',
            help='Lipa na M-Pesa Online short code (default: 174379)'
        )
        parser.add_argument(
            '--query',
            type=str,
            metavar='CHECKOUT_ID',
            help='Query the status of an earlier push instead of sending one'
        )
        parser.add_argument(
            '--phone',
            type=str,
            help='Phone number receiving the prompt (e.g., 254712345678)'
        )
        parser.add_argument(
            '--party-a',
            type=str,
            help='Phone number sending money (default: --phone)'
        )
        parser.add_argument(
            '--party-b',
            type=str,
            help='Organization receiving the funds (default: --short-code)'
        )
        parser.add_argument(
            '--amount',
            type=int,
            default=1,
            help='Amount to charge (default: 1)'
        )
        parser.add_argument(
            '--transaction-type',
            type=str,
            choices=[t.value for t in TransactionType],
            default=TransactionType.CUSTOMER_PAY_BILL_ONLINE.value
        )
        parser.add_argument(
            '--callback-url',
            type=str,
            default='https://example.com/callback',
            help='URL that receives the payment result'
        )
        parser.add_argument(
            '--account-reference',
            type=str,
            default='Daraja',
            help='Account identifier shown to the customer (max 12 chars)'
        )
        parser.add_argument(
            '--transaction-desc',
            type=str,
            default='Payment',
            help='Payment description (max 13 chars)'
        )

    def build_request(self, options):
        if options.get('query'):
            return ExpressQueryRequest(
                pass_key=options['pass_key'],
                business_short_code=options['short_code'],
                checkout_request_id=options['query'],
            )

        if not options.get('phone'):
            raise CommandError('--phone is required unless --query is given')

        phone = format_phone_number(options['phone'])
        return ExpressSimulateRequest(
            pass_key=options['pass_key'],
            business_short_code=options['short_code'],
            transaction_type=options['transaction_type'],
            amount=options['amount'],
            party_a=format_phone_number(options['party_a']) if options.get('party_a') else phone,
            party_b=options.get('party_b') or options['short_code'],
            phone_number=phone,
            callback_url=options['callback_url'],
            account_reference=options['account_reference'],
            transaction_desc=options['transaction_desc'],
        )
