import logging

logger = logging.getLogger(__name__)

SEED_YARN = [
    {'batch_code': 'YRN-001', 'color': 'Blue', 'weight_kg': 500, 'supplier': 'Textile Co'},
    {'batch_code': 'YRN-002', 'color': 'Red', 'weight_kg': 300, 'supplier': 'Yarn Masters'},
]


def seed_pipeline(store):
    """Load demo rows into an empty database. Returns False when yarn already exists."""
    if store.yarn.list():
        logger.info('Yarn batches present, skipping seed data')
        return False

    first = store.yarn.create(SEED_YARN[0])
    for row in SEED_YARN[1:]:
        store.yarn.create(row)
    store.knitting.create({
        'yarn_batch_id': first.id,
        'fabric_type': 'Jersey',
        'weight_used': 100,
        'fabric_produced': 95,
        'status': 'completed',
    })
    logger.info('Seed data applied')
    return True
