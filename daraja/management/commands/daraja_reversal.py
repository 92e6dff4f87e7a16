"""
Management command to reverse a completed transaction.
"""

from daraja.types import ReverseRequest

from ._base import DarajaCommand, add_initiator_arguments, add_result_arguments


class Command(DarajaCommand):
    help = 'Reverse an M-Pesa transaction'
    operation_name = 'Reversal'

    def add_request_arguments(self, parser):
        add_initiator_arguments(parser)
        parser.add_argument(
            '--transaction-id',
            type=str,
            required=True,
            help='M-Pesa receipt number of the transaction to reverse'
        )
        parser.add_argument(
            '--amount',
            type=int,
            required=True,
            help='Amount to reverse'
        )
        parser.add_argument(
            '--receiver-party',
            type=str,
            default='600992',
            help='Organization receiving the reversal (default: 600992)'
        )
        parser.add_argument(
            '--receiver-identifier-type',
            type=int,
            default=11,
            help='Identifier type of the receiver (default: 11)'
        )
        parser.add_argument(
            '--occasion',
            type=str,
            default='',
            help='Optional extra information'
        )
        add_result_arguments(parser)

    def build_request(self, options):
        return ReverseRequest(
            initiator_password=options['initiator_password'],
            initiator_name=options['initiator_name'],
            transaction_id=options['transaction_id'],
            amount=options['amount'],
            receiver_party=options['receiver_party'],
            receiver_identifier_type=options['receiver_identifier_type'],
            queue_timeout_url=options['queue_timeout_url'],
            result_url=options['result_url'],
            remarks=options['remarks'],
            occasion=options['occasion'],
        )
