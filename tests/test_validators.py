"""
Unit tests for field predicates and per-operation request validation.
"""

import pytest

from daraja.exceptions import ValidationError, ValidationErrorKind as Kind
from daraja.types import (
    AccountBalanceRequest,
    B2CPaymentRequest,
    BusinessPayBillRequest,
    C2BRegisterURLRequest,
    C2BSimulateRequest,
    ExpressQueryRequest,
    ExpressSimulateRequest,
    GenerateQRRequest,
    RemitTaxRequest,
    ReverseRequest,
    TransactionStatusRequest,
)
from daraja.utils.validators import (
    is_identifier_type,
    is_phone_number,
    is_short_code,
    is_valid_url,
    validate_request,
    within_length,
)

URL = 'https://example.com/result'


def _express(**overrides):
    values = dict(
        pass_key='passkey',
        business_short_code=174379,
        amount=1,
        party_a=254712345678,
        party_b=174379,
        phone_number=254712345678,
        callback_url='https://example.com/callback',
        account_reference='Order1',
        transaction_desc='Payment',
    )
    values.update(overrides)
    return ExpressSimulateRequest(**values)


def _b2c(**overrides):
    values = dict(
        initiator_password='secret',
        initiator_name='testapi',
        amount=10,
        party_a=600996,
        party_b=254712345678,
        remarks='test',
        queue_timeout_url=URL,
        result_url=URL,
        occasion='test',
    )
    values.update(overrides)
    return B2CPaymentRequest(**values)


def _status(**overrides):
    values = dict(
        initiator_password='secret',
        initiator_name='testapi',
        transaction_id='OEI2AK4Q16',
        party_a=600782,
        identifier_type=4,
        queue_timeout_url=URL,
        result_url=URL,
        remarks='test',
        occasion='test',
    )
    values.update(overrides)
    return TransactionStatusRequest(**values)


def _balance(**overrides):
    values = dict(
        initiator_password='secret',
        initiator_name='testapi',
        identifier_type=4,
        party_a=600772,
        queue_timeout_url=URL,
        result_url=URL,
        remarks='test',
    )
    values.update(overrides)
    return AccountBalanceRequest(**values)


def _reverse(**overrides):
    values = dict(
        initiator_password='secret',
        initiator_name='testapi',
        transaction_id='OEI2AK4Q16',
        amount=10,
        receiver_party=600992,
        receiver_identifier_type=11,
        queue_timeout_url=URL,
        result_url=URL,
        remarks='test',
        occasion='test',
    )
    values.update(overrides)
    return ReverseRequest(**values)


def _tax(**overrides):
    values = dict(
        initiator_password='secret',
        initiator_name='testapi',
        sender_identifier_type=4,
        receiver_identifier_type=4,
        amount=10,
        party_a=600978,
        party_b=572572,
        account_reference='353353',
        queue_timeout_url=URL,
        result_url=URL,
        remarks='test',
    )
    values.update(overrides)
    return RemitTaxRequest(**values)


def _paybill(**overrides):
    values = dict(
        initiator_password='secret',
        initiator_name='testapi',
        sender_identifier_type=4,
        receiver_identifier_type=4,
        amount=10,
        party_a=600986,
        party_b=600986,
        account_reference='353353',
        requester=254700000000,
        queue_timeout_url=URL,
        result_url=URL,
        remarks='test',
    )
    values.update(overrides)
    return BusinessPayBillRequest(**values)


class TestFieldPredicates:

    @pytest.mark.parametrize('value', [254712345678, '254712345678', 100000000000, 999999999999])
    def test_phone_number_accepts_twelve_digits(self, value):
        assert is_phone_number(value)

    @pytest.mark.parametrize('value', [
        99999999999,         # 11 digits
        1000000000000,       # 13 digits
        '0712345678',
        '+254712345678',
        '2547123456ab',
        '',
        None,
        -254712345678,
        True,
    ])
    def test_phone_number_rejects(self, value):
        assert not is_phone_number(value)

    @pytest.mark.parametrize('value', [10000, 174379, '600996', 9999999])
    def test_short_code_accepts_range(self, value):
        assert is_short_code(value)

    @pytest.mark.parametrize('value', [9999, 10000000, 'abc', '', None, False])
    def test_short_code_rejects(self, value):
        assert not is_short_code(value)

    @pytest.mark.parametrize('value', [
        'https://example.com/callback',
        'http://example.com',
        'https://example.com:8443/a/b?c=d',
    ])
    def test_valid_url(self, value):
        assert is_valid_url(value)

    @pytest.mark.parametrize('value', [
        '',
        None,
        'example.com/callback',
        '/relative/path',
        'ftp://example.com/file',
        'https://',
        'http://[::1',
    ])
    def test_invalid_url(self, value):
        assert not is_valid_url(value)

    @pytest.mark.parametrize('value, expected', [
        (1, True), (2, True), (4, True), ('4', True),
        (3, False), (0, False), (11, False), (None, False),
    ])
    def test_identifier_type(self, value, expected):
        assert is_identifier_type(value) is expected

    def test_within_length_boundary(self):
        check = within_length(12)
        assert check('x' * 12)
        assert not check('x' * 13)
        assert check('')
        assert check(None)

    @pytest.mark.parametrize('value', ['0254712345678', '000254712345'])
    def test_phone_number_rejects_leading_zeros(self, value):
        assert not is_phone_number(value)

    @pytest.mark.parametrize('value', ['00010000', '0174379', '0000174379'])
    def test_short_code_rejects_leading_zeros(self, value):
        assert not is_short_code(value)

    def test_within_length_counts_utf8_bytes(self):
        check = within_length(100)
        assert check('\u00e9' * 50)
        assert not check('\u00e9' * 51)


class TestExpressSimulateValidation:

    def test_valid_request(self):
        assert validate_request(_express()) is None

    def test_returns_error_without_raising(self):
        error = validate_request(_express(business_short_code=1))
        assert isinstance(error, ValidationError)
        assert error.kind == Kind.INVALID_SHORT_CODE
        assert error.field == 'BusinessShortCode'

    def test_short_code_checked_before_everything(self):
        error = validate_request(_express(
            business_short_code=1,
            transaction_type='Bogus',
            party_a=1,
            callback_url='nope',
        ))
        assert error.kind == Kind.INVALID_SHORT_CODE

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'transaction_type': 'Bogus', 'party_a': 1}, Kind.INVALID_TRANSACTION_TYPE, 'TransactionType'),
        ({'party_a': 1, 'phone_number': 1}, Kind.INVALID_PHONE_NUMBER, 'PartyA'),
        ({'phone_number': 1, 'party_b': 1}, Kind.INVALID_PHONE_NUMBER, 'PhoneNumber'),
        ({'party_b': 1, 'account_reference': 'x' * 13}, Kind.INVALID_SHORT_CODE, 'PartyB'),
        ({'account_reference': 'x' * 13, 'transaction_desc': 'x' * 14},
         Kind.INVALID_ACCOUNT_REFERENCE, 'AccountReference'),
        ({'transaction_desc': 'x' * 14, 'callback_url': 'nope'},
         Kind.INVALID_TRANSACTION_DESC, 'TransactionDesc'),
        ({'callback_url': 'nope'}, Kind.INVALID_URL, 'CallBackURL'),
    ])
    def test_first_failure_order(self, overrides, kind, field):
        error = validate_request(_express(**overrides))
        assert (error.kind, error.field) == (kind, field)

    def test_buy_goods_is_accepted(self):
        assert validate_request(_express(transaction_type='CustomerBuyGoodsOnline')) is None

    def test_string_numbers_are_accepted(self):
        request = _express(business_short_code='174379', party_a='254712345678', phone_number='254712345678')
        assert validate_request(request) is None

    def test_zero_padded_strings_are_rejected(self):
        error = validate_request(_express(business_short_code='0000174379'))
        assert (error.kind, error.field) == (Kind.INVALID_SHORT_CODE, 'BusinessShortCode')

        error = validate_request(_express(party_a='0254712345678'))
        assert (error.kind, error.field) == (Kind.INVALID_PHONE_NUMBER, 'PartyA')

    def test_length_boundaries(self):
        assert validate_request(_express(account_reference='x' * 12, transaction_desc='x' * 13)) is None

    def test_fresh_error_per_call(self):
        request = _express(callback_url='nope')
        assert validate_request(request) is not validate_request(request)


class TestOperationValidation:

    def test_express_query(self):
        assert validate_request(ExpressQueryRequest(business_short_code=174379)) is None
        error = validate_request(ExpressQueryRequest(business_short_code=12))
        assert (error.kind, error.field) == (Kind.INVALID_SHORT_CODE, 'BusinessShortCode')

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'command_id': 'TransactionReversal', 'party_a': 1}, Kind.INVALID_COMMAND_ID, 'CommandID'),
        ({'party_a': 1, 'party_b': 1}, Kind.INVALID_SHORT_CODE, 'PartyA'),
        ({'party_b': 600996, 'queue_timeout_url': 'x'}, Kind.INVALID_PHONE_NUMBER, 'PartyB'),
        ({'queue_timeout_url': 'x', 'result_url': 'x'}, Kind.INVALID_URL, 'QueueTimeOutURL'),
        ({'result_url': 'x', 'remarks': 'x' * 101}, Kind.INVALID_URL, 'ResultURL'),
        ({'remarks': 'x' * 101, 'occasion': 'x' * 101}, Kind.INVALID_REMARKS, 'Remarks'),
        ({'occasion': 'x' * 101}, Kind.INVALID_OCCASION, 'Occasion'),
    ])
    def test_b2c_order(self, overrides, kind, field):
        error = validate_request(_b2c(**overrides))
        assert (error.kind, error.field) == (kind, field)

    @pytest.mark.parametrize('command_id', ['BusinessPayment', 'SalaryPayment', 'PromotionPayment'])
    def test_b2c_commands(self, command_id):
        assert validate_request(_b2c(command_id=command_id)) is None

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'command_id': 'AccountBalance', 'remarks': 'x' * 101}, Kind.INVALID_COMMAND_ID, 'CommandID'),
        ({'remarks': 'x' * 101, 'occasion': 'x' * 101}, Kind.INVALID_REMARKS, 'Remarks'),
        ({'occasion': 'x' * 101, 'identifier_type': 3}, Kind.INVALID_OCCASION, 'Occasion'),
        ({'identifier_type': 3, 'queue_timeout_url': 'x'}, Kind.INVALID_IDENTIFIER_TYPE, 'IdentifierType'),
        ({'queue_timeout_url': 'x', 'result_url': 'x'}, Kind.INVALID_URL, 'QueueTimeOutURL'),
        ({'result_url': 'x'}, Kind.INVALID_URL, 'ResultURL'),
    ])
    def test_transaction_status_order(self, overrides, kind, field):
        error = validate_request(_status(**overrides))
        assert (error.kind, error.field) == (kind, field)

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'command_id': 'BusinessPayment', 'identifier_type': 3}, Kind.INVALID_COMMAND_ID, 'CommandID'),
        ({'identifier_type': 3, 'queue_timeout_url': 'x'}, Kind.INVALID_IDENTIFIER_TYPE, 'IdentifierType'),
        ({'queue_timeout_url': 'x', 'remarks': 'x' * 101}, Kind.INVALID_URL, 'QueueTimeOutURL'),
        ({'remarks': 'x' * 101, 'party_a': 1}, Kind.INVALID_REMARKS, 'Remarks'),
        ({'party_a': 1}, Kind.INVALID_SHORT_CODE, 'PartyA'),
    ])
    def test_balance_order(self, overrides, kind, field):
        error = validate_request(_balance(**overrides))
        assert (error.kind, error.field) == (kind, field)

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'command_id': 'BusinessPayment', 'result_url': 'x'}, Kind.INVALID_COMMAND_ID, 'CommandID'),
        ({'result_url': 'x', 'remarks': 'x' * 101}, Kind.INVALID_URL, 'ResultURL'),
        ({'remarks': 'x' * 101, 'occasion': 'x' * 101}, Kind.INVALID_REMARKS, 'Remarks'),
        ({'occasion': 'x' * 101}, Kind.INVALID_OCCASION, 'Occasion'),
    ])
    def test_reversal_order(self, overrides, kind, field):
        error = validate_request(_reverse(**overrides))
        assert (error.kind, error.field) == (kind, field)

    def test_reversal_does_not_check_receiver_party(self):
        assert validate_request(_reverse(receiver_party=1, receiver_identifier_type=99)) is None

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'command_id': 'BusinessPayBill', 'remarks': 'x' * 101}, Kind.INVALID_COMMAND_ID, 'CommandID'),
        ({'remarks': 'x' * 101, 'queue_timeout_url': 'x'}, Kind.INVALID_REMARKS, 'Remarks'),
        ({'queue_timeout_url': 'x', 'party_a': 1}, Kind.INVALID_URL, 'QueueTimeOutURL'),
        ({'party_a': 1, 'party_b': 1}, Kind.INVALID_SHORT_CODE, 'PartyA'),
        ({'party_b': 1, 'account_reference': 'x' * 13}, Kind.INVALID_SHORT_CODE, 'PartyB'),
        ({'account_reference': 'x' * 13}, Kind.INVALID_ACCOUNT_REFERENCE, 'AccountReference'),
    ])
    def test_tax_order(self, overrides, kind, field):
        error = validate_request(_tax(**overrides))
        assert (error.kind, error.field) == (kind, field)

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'command_id': 'PayTaxToKRA', 'sender_identifier_type': 3}, Kind.INVALID_COMMAND_ID, 'CommandID'),
        ({'sender_identifier_type': 3, 'receiver_identifier_type': 3},
         Kind.INVALID_IDENTIFIER_TYPE, 'SenderIdentifierType'),
        ({'receiver_identifier_type': 3, 'party_a': 1}, Kind.INVALID_IDENTIFIER_TYPE, 'RecieverIdentifierType'),
        ({'party_a': 1, 'party_b': 1}, Kind.INVALID_SHORT_CODE, 'PartyA'),
        ({'party_b': 1, 'result_url': 'x'}, Kind.INVALID_SHORT_CODE, 'PartyB'),
        ({'result_url': 'x', 'remarks': 'x' * 101}, Kind.INVALID_URL, 'ResultURL'),
        ({'remarks': 'x' * 101, 'account_reference': 'x' * 13}, Kind.INVALID_REMARKS, 'Remarks'),
        ({'account_reference': 'x' * 13}, Kind.INVALID_ACCOUNT_REFERENCE, 'AccountReference'),
    ])
    def test_business_paybill_order(self, overrides, kind, field):
        error = validate_request(_paybill(**overrides))
        assert (error.kind, error.field) == (kind, field)

    @pytest.mark.parametrize('code', ['SB', 'SM', 'PB', 'WA', 'BG'])
    def test_qr_codes(self, code):
        assert validate_request(GenerateQRRequest(trx_code=code)) is None

    def test_qr_rejects_unknown_code(self):
        error = validate_request(GenerateQRRequest(trx_code='XX'))
        assert (error.kind, error.field) == (Kind.INVALID_TRANSACTION_TYPE, 'TrxCode')

    @pytest.mark.parametrize('overrides, kind, field', [
        ({'short_code': 1, 'response_type': 'Maybe'}, Kind.INVALID_SHORT_CODE, 'ShortCode'),
        ({'response_type': 'Maybe', 'validation_url': 'x'}, Kind.INVALID_RESPONSE_TYPE, 'ResponseType'),
        ({'validation_url': 'x', 'confirmation_url': 'x'}, Kind.INVALID_URL, 'ValidationURL'),
        ({'confirmation_url': 'x'}, Kind.INVALID_URL, 'ConfirmationURL'),
    ])
    def test_c2b_register_order(self, overrides, kind, field):
        values = dict(
            short_code=600981,
            response_type='Completed',
            confirmation_url='https://example.com/confirmation',
            validation_url='https://example.com/validation',
        )
        values.update(overrides)
        error = validate_request(C2BRegisterURLRequest(**values))
        assert (error.kind, error.field) == (kind, field)

    def test_c2b_register_cancelled(self):
        request = C2BRegisterURLRequest(
            short_code=600981,
            response_type='Cancelled',
            confirmation_url='https://example.com/confirmation',
            validation_url='https://example.com/validation',
        )
        assert validate_request(request) is None

    def test_c2b_simulate(self):
        assert validate_request(C2BSimulateRequest(short_code=600981, amount=10)) is None

        error = validate_request(C2BSimulateRequest(command_id='BusinessPayment', short_code=1))
        assert (error.kind, error.field) == (Kind.INVALID_COMMAND_ID, 'CommandID')

        error = validate_request(C2BSimulateRequest(short_code=1))
        assert (error.kind, error.field) == (Kind.INVALID_SHORT_CODE, 'ShortCode')

    def test_unknown_request_type(self):
        with pytest.raises(TypeError):
            validate_request(object())
