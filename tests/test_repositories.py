from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import OperationalError

from garment_flow.errors import (ConflictError, FatalStoreError, InvalidReferenceError,
                                 NotFoundError, TransientStoreError, ValidationError)
from garment_flow.services.repository import translate_store_error


class TestYarnBatches:
    def test_create_then_get(self, store):
        created = store.yarn.create({'batch_code': ' YRN-001 ', 'color': 'Blue',
                                     'weight_kg': '500', 'supplier': 'Textile Co'})
        assert created.id > 0
        assert created.received_at is not None

        fetched = store.yarn.get_by_id(created.id)
        assert fetched.batch_code == 'YRN-001'
        assert fetched.weight_kg == 500
        assert fetched.supplier == 'Textile Co'

    def test_list_in_creation_order(self, store):
        for code in ('YRN-A', 'YRN-B', 'YRN-C'):
            store.yarn.create({'batch_code': code, 'color': 'Red', 'weight_kg': 1})
        assert [b.batch_code for b in store.yarn.list()] == ['YRN-A', 'YRN-B', 'YRN-C']

    def test_duplicate_batch_code_conflicts(self, store):
        store.yarn.create({'batch_code': 'YRN-001', 'color': 'Blue', 'weight_kg': 500})
        with pytest.raises(ConflictError, match="Batch code 'YRN-001' already exists"):
            store.yarn.create({'batch_code': 'YRN-001', 'color': 'Red', 'weight_kg': 300})
        assert len(store.yarn.list()) == 1

    def test_missing_and_negative_fields(self, store):
        with pytest.raises(ValidationError, match='Color is required'):
            store.yarn.create({'batch_code': 'YRN-1', 'weight_kg': 5})
        with pytest.raises(ValidationError, match=r'Weight \(kg\) cannot be negative'):
            store.yarn.create({'batch_code': 'YRN-1', 'color': 'Blue', 'weight_kg': -5})
        assert store.yarn.list() == []

    def test_get_missing_returns_none(self, store):
        assert store.yarn.get_by_id(42) is None

    @pytest.mark.parametrize('bad_id', [0, -3, 'abc', 1.5])
    def test_get_rejects_malformed_id(self, store, bad_id):
        with pytest.raises(ValidationError, match='Yarn batch ID must be a positive number'):
            store.yarn.get_by_id(bad_id)

    def test_delete_is_idempotent(self, store):
        batch_id = store.yarn.create({'batch_code': 'YRN-9', 'color': 'Blue', 'weight_kg': 5}).id
        store.yarn.delete(batch_id)
        store.yarn.delete(batch_id)
        store.yarn.delete(999)
        assert store.yarn.get_by_id(batch_id) is None

    def test_ids_past_integer_range_are_absent(self, store):
        huge = 2 ** 64
        assert store.yarn.get_by_id(huge) is None
        store.yarn.delete(huge)
        with pytest.raises(NotFoundError):
            store.yarn.update(huge, {'color': 'Red'})

    def test_ids_are_not_reused(self, store):
        first = store.yarn.create({'batch_code': 'YRN-1', 'color': 'Blue', 'weight_kg': 5})
        first_id = first.id
        store.yarn.delete(first_id)
        second = store.yarn.create({'batch_code': 'YRN-2', 'color': 'Blue', 'weight_kg': 5})
        assert second.id > first_id


class TestStageJobs:
    def test_every_stage_round_trips(self, store, chain):
        assert store.knitting.get_by_id(chain['knitting']).yarn_batch_id == chain['yarn']
        assert store.dyeing.get_by_id(chain['dyeing']).rolls_per_batch == 12
        assert store.cutting.get_by_id(chain['cutting']).quantity_pieces == 400
        assert store.stitching.get_by_id(chain['stitching']).rejected_count == 10
        assert store.pressing.get_by_id(chain['pressing']).quantity_pressed == 390
        assert store.packing.get_by_id(chain['packing']).box_count == 13
        container = store.containers.get_by_id(chain['container'])
        assert container.number_of_bales == 4
        assert container.quantity_per_bale == 97.5

    def test_defaults_applied(self, store, chain):
        knitting = store.knitting.get_by_id(chain['knitting'])
        assert knitting.size == 'Mixed'
        assert knitting.status == 'completed'
        assert knitting.completed_at is not None
        pressing = store.pressing.create({'size': 'L', 'quantity_pressed': 1})
        assert pressing.stitching_job_id is None

    def test_unknown_parent_is_invalid_reference(self, store):
        with pytest.raises(InvalidReferenceError, match='Yarn batch with ID 999 does not exist'):
            store.knitting.create({'yarn_batch_id': 999, 'fabric_type': 'Jersey',
                                   'weight_used': 1, 'fabric_produced': 1})
        assert store.knitting.list() == []

    def test_fractional_count_rejected(self, store):
        with pytest.raises(ValidationError, match='Quantity Pieces must be a whole number'):
            store.cutting.create({'style_code': 'ST', 'size': 'M', 'quantity_pieces': 10.5})

    def test_cutting_takes_one_parent(self, store, chain):
        with pytest.raises(ValidationError, match='not both'):
            store.cutting.create({'dyeing_job_id': chain['dyeing'], 'knitting_job_id': chain['knitting'],
                                  'style_code': 'ST', 'size': 'M', 'quantity_pieces': 1})
        direct = store.cutting.create({'knitting_job_id': chain['knitting'], 'style_code': 'ST-2',
                                       'size': 'S', 'quantity_pieces': 5})
        assert direct.dyeing_job_id is None

    def test_deleting_yarn_removes_whole_genealogy(self, store, chain):
        # intentional: a yarn batch owns everything produced from it
        store.yarn.delete(chain['yarn'])
        assert store.knitting.get_by_id(chain['knitting']) is None
        assert store.dyeing.get_by_id(chain['dyeing']) is None
        assert store.cutting.get_by_id(chain['cutting']) is None
        assert store.stitching.get_by_id(chain['stitching']) is None
        assert store.pressing.get_by_id(chain['pressing']) is None
        assert store.packing.get_by_id(chain['packing']) is None
        assert store.containers.get_by_id(chain['container']) is None
        assert store.containers.list() == []


    @pytest.mark.parametrize('repo, payload, parent', [
        ('knitting', {'yarn_batch_id': 999, 'fabric_type': 'Jersey', 'weight_used': 1,
                      'fabric_produced': 1}, 'Yarn batch'),
        ('dyeing', {'knitting_job_id': 999, 'weight_kg_dyed': 1, 'rolls_per_batch': 1}, 'Knitting job'),
        ('cutting', {'dyeing_job_id': 999, 'style_code': 'ST', 'size': 'M',
                     'quantity_pieces': 1}, 'Dyeing job'),
        ('cutting', {'knitting_job_id': 999, 'style_code': 'ST', 'size': 'M',
                     'quantity_pieces': 1}, 'Knitting job'),
        ('stitching', {'cutting_job_id': 999, 'size': 'M', 'quantity_stitched': 1}, 'Cutting job'),
        ('pressing', {'stitching_job_id': 999, 'size': 'M', 'quantity_pressed': 1}, 'Stitching job'),
        ('packing', {'pressing_job_id': 999, 'size': 'M', 'box_count': 1,
                     'quantity_packed': 1}, 'Pressing job'),
        ('containers', {'packing_job_id': 999, 'number_of_bales': 1, 'quantity_per_bale': 1,
                        'container_type': '20ft'}, 'Packing job'),
    ])
    def test_every_stage_rejects_unknown_parent(self, store, chain, repo, payload, parent):
        repository = getattr(store, repo)
        before = len(repository.list())
        with pytest.raises(InvalidReferenceError, match=f'{parent} with ID 999 does not exist'):
            repository.create(payload)
        assert len(repository.list()) == before

    def test_oversized_values_are_validation_errors(self, store, chain):
        with pytest.raises(ValidationError, match='Quantity Pieces is too large'):
            store.cutting.create({'style_code': 'ST', 'size': 'M', 'quantity_pieces': 1e19})
        with pytest.raises(ValidationError, match='Yarn Batch ID is too large'):
            store.knitting.create({'yarn_batch_id': 10 ** 20, 'fabric_type': 'Jersey',
                                   'weight_used': 1, 'fabric_produced': 1})
        assert len(store.cutting.list()) == 1
        assert len(store.knitting.list()) == 1

    def test_timestamps_with_offsets_order_by_instant(self, store):
        # 10:00+05:00 is 05:00 UTC, an hour before the second batch
        store.yarn.create({'batch_code': 'A', 'color': 'Blue', 'weight_kg': 1,
                           'received_at': '2024-01-01T10:00:00+05:00'})
        store.yarn.create({'batch_code': 'B', 'color': 'Blue', 'weight_kg': 1,
                           'received_at': datetime(2024, 1, 1, 6, 0, tzinfo=timezone.utc)})
        batches = store.yarn.list()
        assert [b.batch_code for b in batches] == ['A', 'B']
        assert batches[0].received_at.replace(tzinfo=None) == datetime(2024, 1, 1, 5, 0)

class TestCostsAndUsers:
    def test_purchase_update_and_delete(self, store):
        purchase = store.raw_materials.create({
            'vendor': 'Cotton Corp', 'material_type': 'Cotton', 'quantity': 1000, 'unit': 'kg',
            'cost_per_unit': 2.5, 'total_cost': 2500,
        })
        assert purchase.payment_status == 'pending'
        updated = store.raw_materials.update(purchase.id, {'payment_status': 'paid'})
        assert updated.payment_status == 'paid'
        assert updated.vendor == 'Cotton Corp'
        store.raw_materials.delete(purchase.id)
        assert store.raw_materials.list() == []

    def test_update_missing_is_not_found(self, store):
        with pytest.raises(NotFoundError, match='Factory cost with ID 7 not found'):
            store.factory_costs.update(7, {'amount': 10})

    def test_factory_cost_requires_description(self, store):
        with pytest.raises(ValidationError, match='Description is required'):
            store.factory_costs.create({'category': 'Power', 'amount': 120})

    def test_user_rules(self, store):
        with pytest.raises(ValidationError, match='Missing required field: username'):
            store.users.create({'email': 'a@b.co'})
        user = store.users.create({'username': 'priya', 'email': 'Priya@Factory.Example'})
        assert user.email == 'priya@factory.example'
        assert user.role == 'user'
        assert user.status == 'active'
        assert user.last_login is None
        assert store.users.get_by_username('priya').id == user.id

        with pytest.raises(ConflictError, match="Username 'priya' already exists"):
            store.users.create({'username': 'priya'})
        with pytest.raises(ValidationError, match='Invalid email format'):
            store.users.create({'username': 'ravi', 'email': 'nope'})

        updated = store.users.update(user.id, {'department': 'Cutting'})
        assert updated.department == 'Cutting'
        assert updated.last_login is None

        signed_in = store.users.record_login(user.id)
        assert signed_in.last_login is not None
        assert signed_in.department == 'Cutting'

    def test_email_conflict_ignores_case(self, store):
        store.users.create({'username': 'priya', 'email': 'priya@factory.example'})
        with pytest.raises(ConflictError, match="Email 'priya@factory.example' already exists"):
            store.users.create({'username': 'priya2', 'email': 'PRIYA@Factory.Example'})
        assert [u.username for u in store.users.list()] == ['priya']

    def test_email_conflict_on_update(self, store):
        store.users.create({'username': 'priya', 'email': 'priya@factory.example'})
        ravi_id = store.users.create({'username': 'ravi'}).id
        with pytest.raises(ConflictError):
            store.users.update(ravi_id, {'email': 'Priya@factory.example'})
        assert store.users.get_by_id(ravi_id).email is None


class TestErrorTranslation:
    def _operational(self, text):
        return OperationalError('SELECT 1', {}, Exception(text))

    def test_busy_engine_is_transient(self):
        error = translate_store_error(self._operational('database is locked'), 'creating yarn batch')
        assert isinstance(error, TransientStoreError)
        assert error.retryable
        assert error.status_code == 503

    def test_unknown_failure_is_fatal(self):
        error = translate_store_error(self._operational('disk I/O error'), 'creating yarn batch')
        assert isinstance(error, FatalStoreError)
        assert error.message == 'Unable to complete creating yarn batch. Please try again.'
        assert not error.retryable

    def test_repository_rolls_back_and_raises_typed_error(self, store, monkeypatch):
        monkeypatch.setattr(store.yarn, 'session', LockedSession())
        with pytest.raises(TransientStoreError):
            store.yarn.list()


class LockedSession:
    rolled_back = False

    def execute(self, *args, **kwargs):
        raise OperationalError('SELECT 1', {}, Exception('database is locked'))

    def rollback(self):
        self.rolled_back = True
