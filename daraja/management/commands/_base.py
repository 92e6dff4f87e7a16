"""
Shared plumbing for the Daraja management commands.
"""

from django.core.management.base import BaseCommand, CommandError

from daraja.client import DarajaClient
from daraja.exceptions import DarajaException
from daraja.middleware import LoggingClient
from daraja.utils.formatters import format_response

SANDBOX_RESULT_URL = 'https://example.com/result'
SANDBOX_TIMEOUT_URL = 'https://example.com/timeout'


class DarajaCommand(BaseCommand):
    """
    Base for commands that send one Daraja request and print the response.

    Subclasses add their own arguments in ``add_request_arguments`` and
    turn parsed options into a request in ``build_request``.
    """

    operation_name = 'Daraja request'

    def add_arguments(self, parser):
        parser.add_argument(
            '--timeout',
            type=float,
            help='Per-call timeout in seconds (default: DARAJA_TIMEOUT)'
        )
        parser.add_argument(
            '--log',
            action='store_true',
            help='Log each call with its duration'
        )
        self.add_request_arguments(parser)

    def add_request_arguments(self, parser):
        pass

    def build_request(self, options):
        raise NotImplementedError('subclasses of DarajaCommand must provide a build_request() method')

    def get_client(self, options):
        client = DarajaClient.from_settings()
        if options.get('log'):
            return LoggingClient(client)
        return client

    def call(self, client, options):
        return client.dispatch(self.build_request(options), timeout=options.get('timeout'))

    def handle(self, *args, **options):
        try:
            client = self.get_client(options)
        except DarajaException as e:
            raise CommandError(f'Invalid Daraja configuration: {str(e)}')

        try:
            response = self.call(client, options)
        except DarajaException as e:
            raise CommandError(f'{self.operation_name} failed: {str(e)}')
        finally:
            client.close()

        self.stdout.write(format_response(response))


def add_initiator_arguments(parser, default_name='testapi'):
    parser.add_argument(
        '--initiator-name',
        type=str,
        default=default_name,
        help=f'API operator username (default: {default_name})'
    )
    parser.add_argument(
        '--initiator-password',
        type=str,
        required=True,
        help='API operator password, encrypted before sending'
    )


def add_result_arguments(parser):
    parser.add_argument(
        '--queue-timeout-url',
        type=str,
        default=SANDBOX_TIMEOUT_URL,
        help=f'URL notified when the request times out (default: {SANDBOX_TIMEOUT_URL})'
    )
    parser.add_argument(
        '--result-url',
        type=str,
        default=SANDBOX_RESULT_URL,
        help=f'URL that receives the result (default: {SANDBOX_RESULT_URL})'
    )
    parser.add_argument(
        '--remarks',
        type=str,
        default='test',
        help='Comments sent along with the request'
    )
