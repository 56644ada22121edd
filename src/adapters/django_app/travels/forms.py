"""
Django Forms para validação de entrada da API.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases.

Responsabilidades:
- Validação estrutural (campos obrigatórios, formato de ids, datas, e-mail)
- Regra de data presente/futura dos tickets
- Produzir violações ordenadas [{field, message}]

Princípios:
- Forms NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities/Use Cases
- Forms são apenas para validação de entrada

Example:
    form = TicketRequestForm(data=payload)
    form.validate()  # lança ValidationFailuresError se inválido
"""

import re
from datetime import date, datetime
from typing import List

from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.utils import timezone

from src.core.shared.exceptions import RequestShapeError, ValidationFailuresError, Violation
from src.core.tickets.use_cases import MISSING_SEARCH_CRITERIA_MESSAGE

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# local@domain; exige exatamente um '@' e nenhum espaço
EMAIL_PATTERN = r'^[^@\s]+@[^@\s]+$'

MUST_NOT_BE_NULL = 'must not be null'
MUST_NOT_BE_EMPTY = 'must not be empty'
MUST_BE_A_NUMBER = 'must be a number'
MALFORMED_EMAIL = 'must be a well-formed email address'
TICKET_DATE_FORMAT = 'date must be in correct format - yyyy-MM-dd'
TICKET_DATE_IN_PAST = 'must be a date in the present or in the future'
SEARCH_DATE_FORMAT = 'travel date is in wrong format, correct format is yyyy-mm-dd'
NEGATIVE_COST = 'must be greater than or equal to 0'
BELOW_MINIMUM = 'must be greater than or equal to %(limit_value)s'
ABOVE_MAXIMUM = 'must be less than or equal to %(limit_value)s'

# Faixas das colunas BigIntegerField / IntegerField
BIGINT_MIN = -9223372036854775808
BIGINT_MAX = 9223372036854775807
INT_MAX = 2147483647

MISSING_CRITERIA_CODE = 'missing_criteria'


def today() -> date:
    """Data local atual (TIME_ZONE das settings)."""
    return timezone.localdate()


def parse_iso_date(value: str) -> date:
    """
    Converte yyyy-MM-dd em date.

    Raises:
        ValueError: Se o valor não casa com o padrão ou não é data de calendário
    """
    if not DATE_PATTERN.match(value):
        raise ValueError(f"Invalid date: {value!r}")
    return datetime.strptime(value, '%Y-%m-%d').date()


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class NumericIdField(forms.CharField):
    """
    Id textual que precisa representar um inteiro.

    O valor limpo continua sendo string (formato de transporte);
    a conversão para int fica no TravelMapper. O inteiro precisa
    caber na coluna de destino (BigIntegerField por padrão).

    Args:
        min_value: Menor inteiro aceito
        max_value: Maior inteiro aceito
    """

    default_error_messages = {
        'required': MUST_NOT_BE_EMPTY,
        'invalid': MUST_BE_A_NUMBER,
        'min_value': BELOW_MINIMUM,
        'max_value': ABOVE_MAXIMUM,
    }

    def __init__(self, *, min_value: int = BIGINT_MIN, max_value: int = BIGINT_MAX, **kwargs):
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(**kwargs)

    def validate(self, value):
        super().validate(value)
        if value in self.empty_values:
            return
        try:
            number = int(value)
        except ValueError:
            raise ValidationError(self.error_messages['invalid'], code='invalid')

        if number < self.min_value:
            raise ValidationError(
                self.error_messages['min_value'],
                code='min_value',
                params={'limit_value': self.min_value},
            )
        if number > self.max_value:
            raise ValidationError(
                self.error_messages['max_value'],
                code='max_value',
                params={'limit_value': self.max_value},
            )


class ResourceForm(forms.Form):
    """
    Form base que traduz erros do Django para violações do Core.

    Violações seguem a ordem de declaração dos campos.
    """

    def violations(self) -> List[Violation]:
        """Violações por campo, na ordem de declaração."""
        errors = self.errors
        result = []
        for name in self.fields:
            for message in errors.get(name, []):
                result.append(Violation(field=name, message=message))
        return result

    def validate(self) -> dict:
        """
        Valida o form.

        Returns:
            cleaned_data

        Raises:
            ValidationFailuresError: Se algum campo é inválido
            RequestShapeError: Se apenas a regra de nível de requisição falhou
        """
        if self.is_valid():
            return self.cleaned_data

        violations = self.violations()
        if violations:
            raise ValidationFailuresError(violations)

        for error in self.non_field_errors().as_data():
            if error.code == MISSING_CRITERIA_CODE:
                raise RequestShapeError(error.message)

        raise ValidationFailuresError(
            [Violation(field='request', message=message) for message in self.non_field_errors()]
        )


# =============================================================================
# CUSTOMERS
# =============================================================================

class CustomerSignUpForm(ResourceForm):
    """Form para cadastro de cliente (PUT /customers/signup)."""

    customerId = forms.IntegerField(
        min_value=BIGINT_MIN,
        max_value=BIGINT_MAX,
        error_messages={
            'required': MUST_NOT_BE_NULL,
            'invalid': MUST_BE_A_NUMBER,
            'min_value': BELOW_MINIMUM,
            'max_value': ABOVE_MAXIMUM,
        },
    )

    firstName = forms.CharField(error_messages={'required': MUST_NOT_BE_EMPTY})

    lastName = forms.CharField(error_messages={'required': MUST_NOT_BE_EMPTY})

    email = forms.CharField(
        validators=[RegexValidator(EMAIL_PATTERN, message=MALFORMED_EMAIL)],
        error_messages={'required': MUST_NOT_BE_EMPTY},
    )

    password = forms.CharField(
        strip=False,
        error_messages={'required': MUST_NOT_BE_EMPTY},
    )


# =============================================================================
# PACKAGES
# =============================================================================

class PackageDetailsForm(ResourceForm):
    """Form para cadastro de pacote (POST /packages)."""

    id = forms.IntegerField(
        min_value=BIGINT_MIN,
        max_value=BIGINT_MAX,
        error_messages={
            'required': MUST_NOT_BE_EMPTY,
            'invalid': MUST_BE_A_NUMBER,
            'min_value': BELOW_MINIMUM,
            'max_value': ABOVE_MAXIMUM,
        },
    )

    packageName = forms.CharField(error_messages={'required': MUST_NOT_BE_EMPTY})

    tripDuration = forms.CharField(error_messages={'required': MUST_NOT_BE_EMPTY})

    costPerPerson = forms.IntegerField(
        min_value=0,
        max_value=INT_MAX,
        error_messages={
            'required': MUST_NOT_BE_EMPTY,
            'invalid': MUST_BE_A_NUMBER,
            'min_value': NEGATIVE_COST,
            'max_value': ABOVE_MAXIMUM,
        },
    )


# =============================================================================
# TICKETS
# =============================================================================

class TicketRequestForm(ResourceForm):
    """
    Form para criação/atualização de ticket.

    Valida dados antes de passar para CreateTicketService/UpdateTicketService.
    A existência do pacote é verificada pelo Use Case.
    """

    ticketId = NumericIdField()

    customerId = NumericIdField()

    packageId = NumericIdField()

    travelDate = forms.CharField(required=False, strip=False)

    totalMembers = NumericIdField(min_value=0, max_value=INT_MAX)

    def clean_travelDate(self):
        """
        Validação da data da viagem.

        Ausente → must not be null; fora do padrão → formato;
        anterior a hoje → presente ou futuro.
        """
        if self.data.get('travelDate') is None:
            raise ValidationError(MUST_NOT_BE_NULL, code='required')

        value = self.cleaned_data.get('travelDate', '')
        try:
            travel_date = parse_iso_date(value)
        except ValueError:
            raise ValidationError(TICKET_DATE_FORMAT, code='invalid')

        if travel_date < today():
            raise ValidationError(TICKET_DATE_IN_PAST, code='past_date')

        return value


class SearchTicketForm(ResourceForm):
    """
    Form para busca de tickets (POST /tickets/search).

    Todos os critérios são opcionais, mas pelo menos um deve
    estar presente.
    """

    customerId = NumericIdField(required=False)

    packageId = NumericIdField(required=False)

    travelDate = forms.CharField(required=False)

    def clean_travelDate(self):
        value = self.cleaned_data.get('travelDate')
        if not value:
            return None

        try:
            parse_iso_date(value)
        except ValueError:
            raise ValidationError(SEARCH_DATE_FORMAT, code='invalid')

        return value

    def clean(self):
        cleaned_data = super().clean()

        if all(_is_blank(self.data.get(name)) for name in self.fields):
            raise ValidationError(MISSING_SEARCH_CRITERIA_MESSAGE, code=MISSING_CRITERIA_CODE)

        return cleaned_data
