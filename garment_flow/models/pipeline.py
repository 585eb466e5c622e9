from garment_flow.extensions import db
from datetime import datetime, timezone

# Every parent -> child edge carries ON DELETE CASCADE: deleting a yarn batch
# removes its whole downstream genealogy. AUTOINCREMENT keeps ids from being reused.


def _now():
    return datetime.now(timezone.utc)


class YarnBatch(db.Model):
    __tablename__ = 'yarn_batches'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    batch_code = db.Column(db.String(100), unique=True, nullable=False)
    color = db.Column(db.String(100), nullable=False)
    weight_kg = db.Column(db.Float, nullable=False)
    supplier = db.Column(db.String(200))
    received_at = db.Column(db.DateTime(timezone=True), default=_now)


class KnittingJob(db.Model):
    __tablename__ = 'knitting_jobs'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    yarn_batch_id = db.Column(db.Integer, db.ForeignKey('yarn_batches.id', ondelete='CASCADE'), index=True)
    fabric_type = db.Column(db.String(100), nullable=False)
    size = db.Column(db.String(50), nullable=False, default='Mixed')
    weight_used = db.Column(db.Float, nullable=False)
    fabric_produced = db.Column(db.Float, nullable=False)
    status = db.Column(db.String(30), default='completed')
    completed_at = db.Column(db.DateTime(timezone=True), default=_now)


class DyeingJob(db.Model):
    __tablename__ = 'dyeing_jobs'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    knitting_job_id = db.Column(db.Integer, db.ForeignKey('knitting_jobs.id', ondelete='CASCADE'), index=True)
    weight_kg_dyed = db.Column(db.Float, nullable=False)
    rolls_per_batch = db.Column(db.Integer, nullable=False)
    dye_color = db.Column(db.String(100))
    completed_at = db.Column(db.DateTime(timezone=True), default=_now)


class CuttingJob(db.Model):
    """Cut from a dyeing job, or straight from a knitting job for undyed fabric."""
    __tablename__ = 'cutting_jobs'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    dyeing_job_id = db.Column(db.Integer, db.ForeignKey('dyeing_jobs.id', ondelete='CASCADE'), index=True)
    knitting_job_id = db.Column(db.Integer, db.ForeignKey('knitting_jobs.id', ondelete='CASCADE'), index=True)
    style_code = db.Column(db.String(100), nullable=False)
    size = db.Column(db.String(50), nullable=False)
    quantity_pieces = db.Column(db.Integer, nullable=False)
    waste_kg = db.Column(db.Float, default=0)
    completed_at = db.Column(db.DateTime(timezone=True), default=_now)


class StitchingJob(db.Model):
    __tablename__ = 'stitching_jobs'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    cutting_job_id = db.Column(db.Integer, db.ForeignKey('cutting_jobs.id', ondelete='CASCADE'), index=True)
    size = db.Column(db.String(50), nullable=False)
    quantity_stitched = db.Column(db.Integer, nullable=False)
    rejected_count = db.Column(db.Integer, default=0)
    completed_at = db.Column(db.DateTime(timezone=True), default=_now)


class PressingJob(db.Model):
    __tablename__ = 'pressing_jobs'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    stitching_job_id = db.Column(db.Integer, db.ForeignKey('stitching_jobs.id', ondelete='CASCADE'), index=True)
    size = db.Column(db.String(50), nullable=False)
    quantity_pressed = db.Column(db.Integer, nullable=False)
    completed_at = db.Column(db.DateTime(timezone=True), default=_now)


class PackingJob(db.Model):
    __tablename__ = 'packing_jobs'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    pressing_job_id = db.Column(db.Integer, db.ForeignKey('pressing_jobs.id', ondelete='CASCADE'), index=True)
    size = db.Column(db.String(50), nullable=False)
    box_count = db.Column(db.Integer, nullable=False)
    quantity_packed = db.Column(db.Integer, nullable=False)
    completed_at = db.Column(db.DateTime(timezone=True), default=_now)


class Container(db.Model):
    __tablename__ = 'containers'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    packing_job_id = db.Column(db.Integer, db.ForeignKey('packing_jobs.id', ondelete='CASCADE'), index=True)
    number_of_bales = db.Column(db.Integer, nullable=False)
    quantity_per_bale = db.Column(db.Float, nullable=False)
    container_type = db.Column(db.String(50), nullable=False)
    container_number = db.Column(db.String(100))
    completed_at = db.Column(db.DateTime(timezone=True), default=_now)
