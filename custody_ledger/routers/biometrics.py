"""Photo and fingerprint endpoints for inmates and officers."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.db.enums import Finger, SubjectType
from custody_ledger.schemas.biometrics import (
    ConfirmRequest,
    FingerprintCreate,
    FingerprintRead,
    PhotoCreate,
    PhotoRead,
    RejectRequest,
    UploadUrlResponse,
)
from custody_ledger.services import biometric_service
from custody_ledger.services.biometric_service import Subject

router = APIRouter()


def _subject(subject_type: SubjectType, subject_id: UUID) -> Subject:
    return Subject(subject_type.value, subject_id)


# =============================================================================
# Photos
# =============================================================================

@router.get("/photos", response_model=list[PhotoRead])
def list_photos(subject_type: SubjectType, subject_id: UUID, db: Session = Depends(get_db)):
    """All photos of a subject, oldest first."""
    return biometric_service.list_photos(db, _subject(subject_type, subject_id))


@router.get("/photos/primary", response_model=PhotoRead)
def get_primary_photo(subject_type: SubjectType, subject_id: UUID, db: Session = Depends(get_db)):
    photo = biometric_service.get_primary_photo(db, _subject(subject_type, subject_id))
    if not photo:
        raise HTTPException(status_code=404, detail="No primary photo")
    return photo


@router.get("/photos/unconfirmed", response_model=list[PhotoRead])
def list_unconfirmed_photos(db: Session = Depends(get_db)):
    """Review queue: photos not yet confirmed."""
    return biometric_service.list_unconfirmed_photos(db)


@router.post("/photos/upload-url", response_model=UploadUrlResponse)
def get_photo_upload_url():
    """Reserve a storage key and return where to upload the image."""
    return biometric_service.generate_upload_url("photo")


@router.get("/photos/{photo_id}", response_model=PhotoRead)
def get_photo(photo_id: UUID, db: Session = Depends(get_db)):
    photo = biometric_service.get_photo(db, photo_id)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")
    return photo


@router.post("/photos", response_model=PhotoRead, status_code=status.HTTP_201_CREATED)
def add_photo(data: PhotoCreate, db: Session = Depends(get_db)):
    photo = biometric_service.add_photo(db, data)
    db.commit()
    return photo


@router.post("/photos/{photo_id}/primary", response_model=PhotoRead)
def set_primary_photo(photo_id: UUID, db: Session = Depends(get_db)):
    photo = biometric_service.set_primary_photo(db, photo_id)
    db.commit()
    return photo


@router.post("/photos/{photo_id}/confirm", response_model=PhotoRead)
def confirm_photo(photo_id: UUID, data: ConfirmRequest, db: Session = Depends(get_db)):
    photo = biometric_service.confirm_photo(
        db, photo_id, data.confirmed_by_id, data.confirm_notes
    )
    db.commit()
    return photo


@router.post("/photos/{photo_id}/reject", response_model=PhotoRead)
def reject_photo(photo_id: UUID, data: RejectRequest, db: Session = Depends(get_db)):
    photo = biometric_service.reject_photo(db, photo_id, data.confirm_notes)
    db.commit()
    return photo


@router.delete("/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_photo(photo_id: UUID, db: Session = Depends(get_db)):
    """Delete a photo and its stored file. A storage failure leaves the photo in place."""
    biometric_service.delete_photo(db, photo_id)
    db.commit()


# =============================================================================
# Fingerprints
# =============================================================================

@router.get("/fingerprints", response_model=list[FingerprintRead])
def list_fingerprints(
    subject_type: SubjectType, subject_id: UUID, db: Session = Depends(get_db)
):
    return biometric_service.list_fingerprints(db, _subject(subject_type, subject_id))


@router.get("/fingerprints/by-finger", response_model=FingerprintRead)
def get_fingerprint_by_finger(
    subject_type: SubjectType,
    subject_id: UUID,
    finger: Finger,
    db: Session = Depends(get_db),
):
    fingerprint = biometric_service.get_fingerprint_by_finger(
        db, _subject(subject_type, subject_id), finger.value
    )
    if not fingerprint:
        raise HTTPException(status_code=404, detail="Fingerprint not found")
    return fingerprint


@router.get("/fingerprints/unconfirmed", response_model=list[FingerprintRead])
def list_unconfirmed_fingerprints(db: Session = Depends(get_db)):
    return biometric_service.list_unconfirmed_fingerprints(db)


@router.post("/fingerprints/upload-url", response_model=UploadUrlResponse)
def get_fingerprint_upload_url():
    return biometric_service.generate_upload_url("fingerprint")


@router.get("/fingerprints/{fingerprint_id}", response_model=FingerprintRead)
def get_fingerprint(fingerprint_id: UUID, db: Session = Depends(get_db)):
    fingerprint = biometric_service.get_fingerprint(db, fingerprint_id)
    if not fingerprint:
        raise HTTPException(status_code=404, detail="Fingerprint not found")
    return fingerprint


@router.post(
    "/fingerprints", response_model=FingerprintRead, status_code=status.HTTP_201_CREATED
)
def add_fingerprint(data: FingerprintCreate, db: Session = Depends(get_db)):
    """Capture a finger. Recapturing an existing slot replaces it and resets confirmation."""
    fingerprint = biometric_service.add_fingerprint(db, data)
    db.commit()
    return fingerprint


@router.post("/fingerprints/{fingerprint_id}/confirm", response_model=FingerprintRead)
def confirm_fingerprint(
    fingerprint_id: UUID, data: ConfirmRequest, db: Session = Depends(get_db)
):
    fingerprint = biometric_service.confirm_fingerprint(
        db, fingerprint_id, data.confirmed_by_id, data.confirm_notes
    )
    db.commit()
    return fingerprint


@router.post("/fingerprints/{fingerprint_id}/reject", response_model=FingerprintRead)
def reject_fingerprint(
    fingerprint_id: UUID, data: RejectRequest, db: Session = Depends(get_db)
):
    fingerprint = biometric_service.reject_fingerprint(db, fingerprint_id, data.confirm_notes)
    db.commit()
    return fingerprint


@router.delete("/fingerprints/{fingerprint_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_fingerprint(fingerprint_id: UUID, db: Session = Depends(get_db)):
    biometric_service.delete_fingerprint(db, fingerprint_id)
    db.commit()
