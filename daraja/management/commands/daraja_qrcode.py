"""
Management command to generate a dynamic M-Pesa QR code.
"""

from daraja.constants import QRTransactionCode
from daraja.types import GenerateQRRequest

from ._base import DarajaCommand


class Command(DarajaCommand):
    help = 'Generate a dynamic M-Pesa QR code'
    operation_name = 'QR code generation'

    def add_request_arguments(self, parser):
        parser.add_argument(
            '--merchant-name',
            type=str,
            default='600981',
            help='Name of the company or M-Pesa merchant'
        )
        parser.add_argument(
            '--ref-no',
            type=str,
            default='Invoice No',
            help='Transaction reference'
        )
        parser.add_argument(
            '--amount',
            type=int,
            default=10
        )
        parser.add_argument(
            '--trx-code',
            type=str,
            choices=[c.value for c in QRTransactionCode],
            default=QRTransactionCode.BUY_GOODS.value,
            help='BG buy goods, WA withdraw agent, PB pay bill, SM send money, SB send business'
        )
        parser.add_argument(
            '--cpi',
            type=str,
            default='174379',
            help='Credit party identifier: till, agent, pay bill, business or MSISDN'
        )
        parser.add_argument(
            '--size',
            type=str,
            default='300',
            help='Image size in pixels (default: 300)'
        )

    def build_request(self, options):
        return GenerateQRRequest(
            merchant_name=options['merchant_name'],
            ref_no=options['ref_no'],
            amount=options['amount'],
            trx_code=options['trx_code'],
            cpi=options['cpi'],
            size=options['size'],
        )
