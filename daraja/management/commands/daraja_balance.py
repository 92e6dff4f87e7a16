"""
Management command to query the balance of a short code.
"""

from daraja.constants import IdentifierType
from daraja.types import AccountBalanceRequest

from ._base import DarajaCommand, add_initiator_arguments, add_result_arguments


class Command(DarajaCommand):
    help = 'Request the account balance of a short code'
    operation_name = 'Balance query'

    def add_request_arguments(self, parser):
        add_initiator_arguments(parser)
        parser.add_argument(
            '--short-code',
            type=str,
            default='600772',
            help='Short code to query (default: 600772)'
        )
        parser.add_argument(
            '--identifier-type',
            type=int,
            choices=[t.value for t in IdentifierType],
            default=IdentifierType.SHORT_CODE.value
        )
        add_result_arguments(parser)

    def build_request(self, options):
        return AccountBalanceRequest(
            initiator_password=options['initiator_password'],
            initiator_name=options['initiator_name'],
            identifier_type=options['identifier_type'],
            party_a=options['short_code'],
            queue_timeout_url=options['queue_timeout_url'],
            result_url=options['result_url'],
            remarks=options['remarks'],
        )
