"""
Pytest fixtures for structmeta tests.
"""

import logging
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for structmeta imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user environment and any local .structmeta.yaml out of tests."""
    for var in ("STRUCTMETA_KIND", "STRUCTMETA_DEBUG", "STRUCTMETA_LOG_FILE", "STRUCTMETA_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger("structmeta")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


USER_GO = '''package models

import "time"

// User is an account holder.
// It owns orders.
type User struct {
	// ID is the primary key.
	ID        int64     `json:"id" db:"id" faker:"uuid_digit"` // primary
	Name      string    `json:"name" fixture:"string:Alice"`
	Email     *string   `json:"email,omitempty"`
	CreatedAt time.Time `json:"createdAt"`
}

// Users is not a struct and is skipped.
type Users []User
'''

ORDER_GO = '''package models

type OrderItem struct {
	Price, Quantity int
	Notes           []*string
}

// Repository loads orders.
type Repository interface {
	Get(id int64) (*OrderItem, error)
}
'''

BROKEN_GO = '''package models

type Broken struct {
	ID int64
'''


@pytest.fixture
def user_go_file(temp_dir: Path) -> Path:
    """Go file with one documented struct and a skipped slice type."""
    file_path = temp_dir / "user.go"
    file_path.write_text(USER_GO)
    return file_path


@pytest.fixture
def order_go_file(temp_dir: Path) -> Path:
    """Go file with a struct and an interface."""
    file_path = temp_dir / "order.go"
    file_path.write_text(ORDER_GO)
    return file_path


@pytest.fixture
def broken_go_file(temp_dir: Path) -> Path:
    """Go file with a syntax error."""
    file_path = temp_dir / "broken.go"
    file_path.write_text(BROKEN_GO)
    return file_path
