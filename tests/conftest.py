import pytest

from garment_flow import create_app
from garment_flow.services.store import get_store


@pytest.fixture
def app():
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield get_store()


@pytest.fixture
def chain(store):
    """One record at every stage, yarn through container."""
    yarn = store.yarn.create({'batch_code': 'YRN-100', 'color': 'Navy', 'weight_kg': 500})
    knitting = store.knitting.create({'yarn_batch_id': yarn.id, 'fabric_type': 'Jersey',
                                      'weight_used': 100, 'fabric_produced': 95})
    dyeing = store.dyeing.create({'knitting_job_id': knitting.id, 'weight_kg_dyed': 90,
                                  'rolls_per_batch': 12, 'dye_color': 'Navy'})
    cutting = store.cutting.create({'dyeing_job_id': dyeing.id, 'style_code': 'ST-1',
                                    'size': 'M', 'quantity_pieces': 400, 'waste_kg': 2.5})
    stitching = store.stitching.create({'cutting_job_id': cutting.id, 'size': 'M',
                                        'quantity_stitched': 390, 'rejected_count': 10})
    pressing = store.pressing.create({'stitching_job_id': stitching.id, 'size': 'M',
                                      'quantity_pressed': 390})
    packing = store.packing.create({'pressing_job_id': pressing.id, 'size': 'M',
                                    'box_count': 13, 'quantity_packed': 390})
    container = store.containers.create({'packing_job_id': packing.id, 'number_of_bales': 4,
                                         'quantity_per_bale': 97.5, 'container_type': '20ft'})
    return {
        'yarn': yarn.id, 'knitting': knitting.id, 'dyeing': dyeing.id, 'cutting': cutting.id,
        'stitching': stitching.id, 'pressing': pressing.id, 'packing': packing.id,
        'container': container.id,
    }
