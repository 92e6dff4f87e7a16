"""
Management command to remit tax to the Kenya Revenue Authority.
"""

from daraja.constants import IdentifierType
from daraja.types import RemitTaxRequest

from ._base import DarajaCommand, add_initiator_arguments, add_result_arguments


class Command(DarajaCommand):
    help = 'Remit tax to KRA'
    operation_name = 'Tax remittance'

    def add_request_arguments(self, parser):
        add_initiator_arguments(parser)
        parser.add_argument(
            '--amount',
            type=int,
            required=True
        )
        parser.add_argument(
            '--party-a',
            type=str,
            default='600978',
            help='Short code remitting the tax (default: 600978)'
        )
        parser.add_argument(
            '--party-b',
            type=str,
            default='572572',
            help='KRA short code (default: 572572)'
        )
        parser.add_argument(
            '--account-reference',
            type=str,
            default='353353',
            help='Payment registration number issued by KRA'
        )
        parser.add_argument(
            '--sender-identifier-type',
            type=int,
            default=IdentifierType.SHORT_CODE.value
        )
        parser.add_argument(
            '--receiver-identifier-type',
            type=int,
            default=IdentifierType.SHORT_CODE.value
        )
        add_result_arguments(parser)

    def build_request(self, options):
        return RemitTaxRequest(
            initiator_password=options['initiator_password'],
            initiator_name=options['initiator_name'],
            sender_identifier_type=options['sender_identifier_type'],
            receiver_identifier_type=options['receiver_identifier_type'],
            amount=options['amount'],
            party_a=options['party_a'],
            party_b=options['party_b'],
            account_reference=options['account_reference'],
            queue_timeout_url=options['queue_timeout_url'],
            result_url=options['result_url'],
            remarks=options['remarks'],
        )
