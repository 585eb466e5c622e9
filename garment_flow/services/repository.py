"""Base repository: typed list/get/create/update/delete over one model.

Every store failure is rolled back and surfaced as one of the typed errors in
`garment_flow.errors`, so callers can tell client mistakes (validation,
conflict, bad reference) from server trouble (transient vs fatal).
"""
import logging
from collections import namedtuple
from datetime import datetime, timezone

from sqlalchemy import select, delete
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError

from garment_flow.errors import (ConflictError, FatalStoreError, InvalidReferenceError,
                                 NotFoundError, TransientStoreError, ValidationError)
from garment_flow.utils.validators import MAX_INTEGER, require_id, require_integer, require_number

logger = logging.getLogger(__name__)

Rule = namedtuple('Rule', ['name', 'label', 'check', 'required'])

TRANSIENT_MARKERS = ('database is locked', 'database is busy', 'sqlite_busy',
                     'could not connect', 'connection refused', 'server closed the connection',
                     'timeout', 'deadlock')


def translate_store_error(error, context):
    """Map a SQLAlchemy error onto the typed error taxonomy."""
    text = str(getattr(error, 'orig', error)).lower()

    if isinstance(error, IntegrityError):
        if 'unique' in text or 'duplicate' in text:
            return ConflictError('That record already exists. Please use a different value.')
        if 'foreign key' in text:
            return InvalidReferenceError('Cannot save this record because it references a non-existent record.')
        if 'not null' in text or 'not-null' in text:
            return ValidationError('A required field is missing')

    if isinstance(error, OperationalError) and any(m in text for m in TRANSIENT_MARKERS):
        return TransientStoreError('Database is busy. Please try again in a moment.')
    if isinstance(error, DBAPIError) and error.connection_invalidated:
        return TransientStoreError('Database connection was lost. Please try again.')

    return FatalStoreError(f'Unable to complete {context}. Please try again.')


# ─── Field checks for Rule.check ───

def optional_text(value, field):
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def optional_number(value, field):
    if value is None or value == '':
        return None
    return require_number(value, field)


def optional_integer(value, field):
    if value is None or value == '':
        return None
    return require_integer(value, field)


def reference_id(value, field):
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a positive number', field)
    try:
        ref = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f'{field} must be a positive number', field)
    if ref <= 0:
        raise ValidationError(f'{field} must be a positive number', field)
    if ref > MAX_INTEGER:
        raise ValidationError(f'{field} is too large', field)
    if ref != float(value):
        raise ValidationError(f'{field} must be a positive number', field)
    return ref


def optional_timestamp(value, field):
    if value is None or value == '':
        return None
    if not isinstance(value, datetime):
        try:
            value = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            raise ValidationError(f'{field} must be a valid date', field)
    # stored without an offset, so every timestamp is kept as UTC; naive input already is
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Repository:
    model = None
    label = 'record'
    plural = 'records'
    order_by = 'id'
    rules = ()
    unique_fields = ()      # (attribute, label)
    references = {}         # attribute -> (label, parent model)

    def __init__(self, session):
        self.session = session

    # ─── Reads ───

    def list(self):
        logger.debug(f'Fetching all {self.plural}')
        column = getattr(self.model, self.order_by)
        stmt = select(self.model).order_by(column.asc(), self.model.id.asc())
        try:
            return self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise self._fail(e, f'fetching {self.plural}')

    def get_by_id(self, id):
        """Record or None. Only a malformed id is an error."""
        if not self._storable_id(id):
            return None
        logger.debug(f'Fetching {self.label} with ID: {id}')
        try:
            return self.session.get(self.model, id)
        except SQLAlchemyError as e:
            raise self._fail(e, f'fetching {self.label}')

    # ─── Writes ───

    def create(self, data):
        values = self.validate(data)
        self._check_constraints(values, f'creating {self.label}')
        logger.info(f'Creating {self.label}: {self.describe(values)}')
        record = self.model(**values)
        self.session.add(record)
        self._commit(f'creating {self.label}')
        logger.info(f'{self.label.capitalize()} created (ID: {record.id})')
        return record

    def update(self, id, data):
        record = self.get_by_id(id)
        if record is None:
            raise NotFoundError(f'{self.label.capitalize()} with ID {id} not found')
        values = self.validate(data, partial=True)
        self._check_constraints(values, f'updating {self.label}', exclude_id=id)
        logger.info(f'Updating {self.label} {id}')
        for key, value in values.items():
            setattr(record, key, value)
        self._commit(f'updating {self.label}')
        return record

    def delete(self, id):
        """Idempotent. Dependent rows further down the chain go with it (ON DELETE CASCADE)."""
        if not self._storable_id(id):
            return
        logger.info(f'Deleting {self.label} with ID: {id}')
        try:
            self.session.execute(delete(self.model).where(self.model.id == id))
        except SQLAlchemyError as e:
            raise self._fail(e, f'deleting {self.label}')
        self._commit(f'deleting {self.label}')

    # ─── Validation ───

    def validate(self, data, partial=False):
        """Apply the rules in order; the first failing field is reported. Absent/None values are left to column defaults."""
        if not isinstance(data, dict):
            raise ValidationError('Request body must be an object')
        values = {}
        for rule in self.rules:
            if rule.name not in data or data[rule.name] is None:
                if rule.required and not partial:
                    rule.check(None, rule.label)
                continue
            value = rule.check(data[rule.name], rule.label)
            if value is not None:
                values[rule.name] = value
        return values

    def describe(self, values):
        return ', '.join(f'{k}={v}' for k, v in values.items() if not k.endswith('_id'))

    def _storable_id(self, id):
        """Validate the id. False when it is well-formed but past the INTEGER range, so no row can have it."""
        if isinstance(id, int) and not isinstance(id, bool) and id > MAX_INTEGER:
            return False
        require_id(id, f'{self.label.capitalize()} ID')
        return True

    def _check_constraints(self, values, context, exclude_id=None):
        """Uniqueness and parent existence checked up front for clear messages; the schema still enforces both."""
        try:
            self._check_unique(values, exclude_id)
            self._check_references(values)
        except SQLAlchemyError as e:
            raise self._fail(e, context)

    def _check_unique(self, values, exclude_id=None):
        for name, label in self.unique_fields:
            value = values.get(name)
            if value is None:
                continue
            stmt = select(self.model.id).where(getattr(self.model, name) == value)
            if exclude_id is not None:
                stmt = stmt.where(self.model.id != exclude_id)
            if self.session.execute(stmt).first() is not None:
                raise ConflictError(f"{label} '{value}' already exists")

    def _check_references(self, values):
        for name, (label, parent) in self.references.items():
            ref = values.get(name)
            if ref is not None and self.session.get(parent, ref) is None:
                raise InvalidReferenceError(f'{label} with ID {ref} does not exist')

    def _commit(self, context):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail(e, context)

    def _fail(self, error, context):
        self.session.rollback()
        translated = translate_store_error(error, context)
        logger.error(f'{type(translated).__name__} while {context}: {error}')
        return translated
