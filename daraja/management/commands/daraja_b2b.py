"""
Management command to pay into another business's pay bill.
"""

from daraja.constants import IdentifierType
from daraja.types import BusinessPayBillRequest
from daraja.utils.formatters import format_phone_number

from ._base import DarajaCommand, add_initiator_arguments, add_result_arguments


class Command(DarajaCommand):
    help = 'Pay from a business short code into a pay bill (B2B)'
    operation_name = 'Business pay bill'

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
            default='600986',
            help='Short code sending the funds (default: 600986)'
        )
        parser.add_argument(
            '--party-b',
            type=str,
            default='600986',
            help='Pay bill receiving the funds (default: 600986)'
        )
        parser.add_argument(
            '--account-reference',
            type=str,
            default='353353',
            help='Account number at the receiving pay bill'
        )
        parser.add_argument(
            '--requester',
            type=str,
            default='',
            help='Customer phone number on whose behalf the payment is made'
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
        parser.add_argument(
            '--occasion',
            type=str,
            default='',
            help='Optional extra information'
        )
        add_result_arguments(parser)

    def build_request(self, options):
        requester = options.get('requester')
        return BusinessPayBillRequest(
            initiator_password=options['initiator_password'],
            initiator_name=options['initiator_name'],
            sender_identifier_type=options['sender_identifier_type'],
            receiver_identifier_type=options['receiver_identifier_type'],
            amount=options['amount'],
            party_a=options['party_a'],
            party_b=options['party_b'],
            account_reference=options['account_reference'],
            requester=format_phone_number(requester) if requester else None,
            queue_timeout_url=options['queue_timeout_url'],
            result_url=options['result_url'],
            remarks=options['remarks'],
            occasion=options['occasion'],
        )
