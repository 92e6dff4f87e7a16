"""
Management command to fetch a Daraja bearer token.
"""

from daraja.utils.formatters import mask_value

from ._base import DarajaCommand


class Command(DarajaCommand):
    help = 'Fetch a Daraja OAuth bearer token'
    operation_name = 'Token request'

    def add_request_arguments(self, parser):
        parser.add_argument(
            '--show-token',
            action='store_true',
            help='Print the full access token instead of a masked one'
        )

    def call(self, client, options):
        token = client.token(timeout=options.get('timeout'))
        if not options['show_token']:
            token.access_token = mask_value(token.access_token)
        return token
