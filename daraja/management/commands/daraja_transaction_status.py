"""
Management command to query the status of a transaction.
"""

from daraja.constants import IdentifierType
from daraja.types import TransactionStatusRequest

from ._base import DarajaCommand, add_initiator_arguments, add_result_arguments


class Command(DarajaCommand):
    help = 'Query the status of an M-Pesa transaction'
    operation_name = 'Transaction status query'

    def add_request_arguments(self, parser):
        add_initiator_arguments(parser)
        parser.add_argument(
            '--transaction-id',
            type=str,
            required=True,
            help='M-Pesa receipt number'
        )
        parser.add_argument(
            '--party-a',
            type=str,
            default='600782',
            help='Organization or MSISDN the transaction belongs to (default: 600782)'
        )
        parser.add_argument(
            '--identifier-type',
            type=int,
            choices=[t.value for t in IdentifierType],
            default=IdentifierType.SHORT_CODE.value
        )
        parser.add_argument(
            '--occasion',
            type=str,
            default='',
            help='Optional extra information'
        )
        add_result_arguments(parser)

    def build_request(self, options):
        return TransactionStatusRequest(
            initiator_password=options['initiator_password'],
            initiator_name=options['initiator_name'],
            transaction_id=options['transaction_id'],
            party_a=options['party_a'],
            identifier_type=options['identifier_type'],
            queue_timeout_url=options['queue_timeout_url'],
            result_url=options['result_url'],
            remarks=options['remarks'],
            occasion=options['occasion'],
        )
