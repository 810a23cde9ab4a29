"""Baseline: facilities, inmates, custody, biometrics, records, attendance.

Revision ID: 0001_baseline
Revises:
Create Date: 2026-10-17

Creates:
- prisons, courts, offenses, officers
- inmates, inmate_charges
- movements, court_appearances
- photos, fingerprints
- visits, items_in_custody, medical_records
- officer_attendance
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_baseline'
down_revision = None
branch_labels = None
depends_on = None

SUBJECT_CHECK = (
    "(subject_type = 'inmate' AND inmate_id IS NOT NULL AND officer_id IS NULL)"
    " OR (subject_type = 'officer' AND officer_id IS NOT NULL AND inmate_id IS NULL)"
)


def _created_at() -> sa.Column:
    return sa.Column(
        'created_at', sa.DateTime(timezone=True),
        server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False,
    )


def upgrade() -> None:
    # ==========================================================================
    # Facilities and reference data
    # ==========================================================================
    op.create_table(
        'prisons',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('region', sa.String(100), nullable=True),
        sa.Column('district', sa.String(100), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('contact_phone', sa.String(50), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_prisons_code', 'prisons', ['code'], unique=True)
    op.create_index('idx_prisons_type', 'prisons', ['type'])
    op.create_index('idx_prisons_region', 'prisons', ['region'])

    op.create_table(
        'courts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(30), nullable=True),
        sa.Column('district', sa.String(100), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_courts_type', 'courts', ['type'])
    op.create_index('idx_courts_district', 'courts', ['district'])

    op.create_table(
        'offenses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('act', sa.String(255), nullable=True),
        sa.Column('section', sa.String(50), nullable=True),
        sa.Column('chapter', sa.String(50), nullable=True),
        sa.Column('category', sa.String(20), nullable=True),
        sa.Column('amended_by', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('max_sentence_years', sa.Integer(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_offenses_category', 'offenses', ['category'])

    op.create_table(
        'officers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('prison_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('badge_number', sa.String(50), nullable=False),
        sa.Column('rank', sa.String(100), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['prison_id'], ['prisons.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_officers_badge_number', 'officers', ['badge_number'], unique=True)
    op.create_index('idx_officers_prison', 'officers', ['prison_id'])

    # ==========================================================================
    # Inmates
    # ==========================================================================
    op.create_table(
        'inmates',
        sa.Column('id', sa.Uuid(), nullable=False),

        # Identity
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('other_names', sa.String(255), nullable=True),
        sa.Column('prison_number', sa.String(50), nullable=False),
        sa.Column('national_id', sa.String(50), nullable=True),
        sa.Column('dob', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(10), nullable=False),
        sa.Column('nationality', sa.String(100), nullable=True),
        sa.Column('tribe', sa.String(100), nullable=True),
        sa.Column('religion', sa.String(100), nullable=True),
        sa.Column('education_level', sa.String(100), nullable=True),
        sa.Column('marital_status', sa.String(50), nullable=True),
        sa.Column('occupation', sa.String(100), nullable=True),
        sa.Column('next_of_kin_name', sa.String(255), nullable=True),
        sa.Column('next_of_kin_phone', sa.String(50), nullable=True),
        sa.Column('next_of_kin_relationship', sa.String(100), nullable=True),

        # Custody
        sa.Column('inmate_type', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('risk_level', sa.String(20), nullable=True),
        sa.Column('prison_id', sa.Uuid(), nullable=False),
        sa.Column('cell_block', sa.String(50), nullable=True),
        sa.Column('cell_number', sa.String(50), nullable=True),

        # Case
        sa.Column('case_number', sa.String(100), nullable=False),
        sa.Column('offense_id', sa.Uuid(), nullable=False),
        sa.Column('arresting_station', sa.String(255), nullable=True),
        sa.Column('admission_date', sa.Date(), nullable=False),
        sa.Column('remand_expiry', sa.Date(), nullable=True),
        sa.Column('next_court_date', sa.Date(), nullable=True),

        # Sentencing
        sa.Column('conviction_date', sa.Date(), nullable=True),
        sa.Column('sentence_start', sa.Date(), nullable=True),
        sa.Column('sentence_end', sa.Date(), nullable=True),
        sa.Column('sentence_duration', sa.String(100), nullable=True),
        sa.Column('is_life_sentence', sa.Boolean(), nullable=True),
        sa.Column('fine_amount', sa.Numeric(12, 2), nullable=True),
        sa.Column('fine_paid', sa.Boolean(), nullable=True),

        # Release
        sa.Column('actual_release_date', sa.Date(), nullable=True),
        sa.Column('release_reason', sa.String(20), nullable=True),

        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False,
        ),
        sa.ForeignKeyConstraint(['prison_id'], ['prisons.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['offense_id'], ['offenses.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_inmates_prison_number', 'inmates', ['prison_number'], unique=True)
    op.create_index('idx_inmates_prison', 'inmates', ['prison_id'])
    op.create_index('idx_inmates_status', 'inmates', ['status'])
    op.create_index('idx_inmates_type', 'inmates', ['inmate_type'])
    op.create_index('idx_inmates_national_id', 'inmates', ['national_id'])
    op.create_index('idx_inmates_case_number', 'inmates', ['case_number'])

    op.create_table(
        'inmate_charges',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=False),
        sa.Column('offense_id', sa.Uuid(), nullable=False),
        sa.Column('is_primary', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['offense_id'], ['offenses.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_inmate_charges_inmate', 'inmate_charges', ['inmate_id'])
    op.create_index('idx_inmate_charges_offense', 'inmate_charges', ['offense_id'])

    # ==========================================================================
    # Custody events
    # ==========================================================================
    op.create_table(
        'movements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=False),
        sa.Column('from_prison_id', sa.Uuid(), nullable=True),
        sa.Column('to_prison_id', sa.Uuid(), nullable=True),
        sa.Column('officer_id', sa.Uuid(), nullable=True),
        sa.Column('movement_type', sa.String(20), nullable=False),
        sa.Column('destination', sa.String(255), nullable=True),
        sa.Column('departure_date', sa.Date(), nullable=False),
        sa.Column('return_date', sa.Date(), nullable=True),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['from_prison_id'], ['prisons.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['to_prison_id'], ['prisons.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['officer_id'], ['officers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_movements_inmate', 'movements', ['inmate_id'])
    op.create_index('idx_movements_type', 'movements', ['movement_type'])
    op.create_index('idx_movements_from_prison', 'movements', ['from_prison_id'])
    op.create_index('idx_movements_to_prison', 'movements', ['to_prison_id'])

    op.create_table(
        'court_appearances',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=False),
        sa.Column('court_id', sa.Uuid(), nullable=False),
        sa.Column('officer_id', sa.Uuid(), nullable=True),
        sa.Column('scheduled_date', sa.Date(), nullable=False),
        sa.Column('departure_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('return_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('outcome', sa.String(20), nullable=True),
        sa.Column('next_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['court_id'], ['courts.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['officer_id'], ['officers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_court_appearances_inmate', 'court_appearances', ['inmate_id'])
    op.create_index('idx_court_appearances_court', 'court_appearances', ['court_id'])
    op.create_index('idx_court_appearances_scheduled', 'court_appearances', ['scheduled_date'])

    # ==========================================================================
    # Biometrics
    # ==========================================================================
    op.create_table(
        'photos',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('subject_type', sa.String(10), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=True),
        sa.Column('officer_id', sa.Uuid(), nullable=True),
        sa.Column('photo_type', sa.String(20), nullable=False),
        sa.Column('provider', sa.String(20), nullable=False),
        sa.Column('storage_key', sa.String(512), nullable=True),
        sa.Column('external_url', sa.Text(), nullable=True),
        sa.Column('base64_preview', sa.Text(), nullable=True),
        sa.Column('file_size', sa.Integer(), nullable=True),
        sa.Column('mime_type', sa.String(100), nullable=True),
        sa.Column('captured_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('captured_by_id', sa.Uuid(), nullable=True),
        sa.Column('is_primary', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_confirmed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('confirmed_by_id', sa.Uuid(), nullable=True),
        sa.Column('confirmed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('confirm_notes', sa.Text(), nullable=True),
        _created_at(),
        sa.CheckConstraint(SUBJECT_CHECK, name='ck_photos_subject'),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['officer_id'], ['officers.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['captured_by_id'], ['officers.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['confirmed_by_id'], ['officers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_photos_inmate', 'photos', ['inmate_id'])
    op.create_index('idx_photos_officer', 'photos', ['officer_id'])
    op.create_index('idx_photos_subject_confirmed', 'photos', ['subject_type', 'is_confirmed'])
    op.create_index(
        'uq_photos_primary_inmate',
        'photos',
        ['inmate_id'],
        unique=True,
        postgresql_where=sa.text('is_primary'),
        sqlite_where=sa.text('is_primary = 1'),
    )
    op.create_index(
        'uq_photos_primary_officer',
        'photos',
        ['officer_id'],
        unique=True,
        postgresql_where=sa.text('is_primary'),
        sqlite_where=sa.text('is_primary = 1'),
    )

    op.create_table(
        'fingerprints',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('subject_type', sa.String(10), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=True),
        sa.Column('officer_id', sa.Uuid(), nullable=True),
        sa.Column('finger', sa.String(20), nullable=False),
        sa.Column('provider', sa.String(20), nullable=False),
        sa.Column('storage_key', sa.String(512), nullable=True),
        sa.Column('template_data', sa.Text(), nullable=True),
        sa.Column('provider_name', sa.String(100), nullable=True),
        sa.Column('provider_ref', sa.String(255), nullable=True),
        sa.Column('quality', sa.Integer(), nullable=True),
        sa.Column('captured_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('captured_by_id', sa.Uuid(), nullable=True),
        sa.Column('is_confirmed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('confirmed_by_id', sa.Uuid(), nullable=True),
        sa.Column('confirmed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('confirm_notes', sa.Text(), nullable=True),
        _created_at(),
        sa.CheckConstraint(SUBJECT_CHECK, name='ck_fingerprints_subject'),
        sa.CheckConstraint(
            'quality IS NULL OR (quality >= 0 AND quality <= 100)',
            name='ck_fingerprints_quality',
        ),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['officer_id'], ['officers.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['captured_by_id'], ['officers.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['confirmed_by_id'], ['officers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_fingerprints_inmate', 'fingerprints', ['inmate_id'])
    op.create_index('idx_fingerprints_officer', 'fingerprints', ['officer_id'])
    op.create_index('idx_fingerprints_subject', 'fingerprints', ['subject_type'])
    op.create_index(
        'uq_fingerprints_inmate_finger', 'fingerprints', ['inmate_id', 'finger'], unique=True
    )
    op.create_index(
        'uq_fingerprints_officer_finger', 'fingerprints', ['officer_id', 'finger'], unique=True
    )

    # ==========================================================================
    # Visits, property and medical records
    # ==========================================================================
    op.create_table(
        'visits',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=False),
        sa.Column('prison_id', sa.Uuid(), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('id_number', sa.String(100), nullable=False),
        sa.Column('id_type', sa.String(20), nullable=True),
        sa.Column('relationship', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('scheduled_date', sa.Date(), nullable=True),
        sa.Column('check_in_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('check_out_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('denial_reason', sa.Text(), nullable=True),
        sa.Column('items_declaration', sa.Text(), nullable=True),
        sa.Column('flagged', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('flag_reason', sa.Text(), nullable=True),
        sa.Column('approved_by_id', sa.Uuid(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['prison_id'], ['prisons.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['approved_by_id'], ['officers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_visits_inmate', 'visits', ['inmate_id'])
    op.create_index('idx_visits_status', 'visits', ['status'])
    op.create_index('idx_visits_prison', 'visits', ['prison_id'])
    op.create_index('idx_visits_check_out', 'visits', ['check_out_time'])

    op.create_table(
        'items_in_custody',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('value', sa.Numeric(12, 2), nullable=True),
        sa.Column('condition', sa.String(10), nullable=True),
        sa.Column('storage_location', sa.String(255), nullable=True),
        sa.Column('returned_at', sa.Date(), nullable=True),
        sa.Column('returned_to_name', sa.String(255), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_items_in_custody_inmate', 'items_in_custody', ['inmate_id'])

    op.create_table(
        'medical_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('inmate_id', sa.Uuid(), nullable=False),
        sa.Column('record_type', sa.String(30), nullable=False),
        sa.Column('diagnosis', sa.Text(), nullable=True),
        sa.Column('treatment', sa.Text(), nullable=True),
        sa.Column('attended_by', sa.String(255), nullable=True),
        sa.Column('referred_to_hospital', sa.String(255), nullable=True),
        sa.Column('record_date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['inmate_id'], ['inmates.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_medical_records_inmate', 'medical_records', ['inmate_id'])
    op.create_index('idx_medical_records_type', 'medical_records', ['record_type'])
    op.create_index('idx_medical_records_date', 'medical_records', ['record_date'])

    # ==========================================================================
    # Officer attendance
    # ==========================================================================
    op.create_table(
        'officer_attendance',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('officer_id', sa.Uuid(), nullable=False),
        sa.Column('prison_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('shift', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('check_in_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('check_out_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('hours_worked', sa.Numeric(5, 2), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('recorded_by_id', sa.Uuid(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['officer_id'], ['officers.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['prison_id'], ['prisons.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['recorded_by_id'], ['officers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_officer_attendance_officer', 'officer_attendance', ['officer_id'])
    op.create_index('idx_officer_attendance_date', 'officer_attendance', ['date'])
    op.create_index('idx_officer_attendance_prison', 'officer_attendance', ['prison_id'])
    op.create_index(
        'uq_officer_attendance_slot',
        'officer_attendance',
        ['officer_id', 'date', 'shift'],
        unique=True,
    )


def downgrade() -> None:
    for table in (
        'officer_attendance',
        'medical_records',
        'items_in_custody',
        'visits',
        'fingerprints',
        'photos',
        'court_appearances',
        'movements',
        'inmate_charges',
        'inmates',
        'officers',
        'offenses',
        'courts',
        'prisons',
    ):
        op.drop_table(table)
