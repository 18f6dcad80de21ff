"""Pytest configuration and fixtures for sqlc-querygen tests."""

import pytest

from sqlc_querygen.config import Settings


SAMPLE_DDL = '''-- CreateSchema
CREATE SCHEMA IF NOT EXISTS "account";

-- CreateSchema
CREATE SCHEMA IF NOT EXISTS "catalog";

-- CreateEnum
CREATE TYPE "account"."status" AS ENUM ('active', 'suspended');

-- CreateTable
CREATE TABLE "account"."account" (
    "id" BIGSERIAL NOT NULL,
    "code" TEXT NOT NULL,
    "email" TEXT,
    "username" TEXT,
    "status" "account"."status" NOT NULL DEFAULT 'active',
    "date_created" TIMESTAMPTZ(3) NOT NULL DEFAULT CURRENT_TIMESTAMP,

    CONSTRAINT "account_pkey" PRIMARY KEY ("id")
);

-- CreateTable
CREATE TABLE "account"."cart_item" (
    "account_id" BIGINT NOT NULL,
    "sku_id" BIGINT NOT NULL,
    "quantity" INTEGER NOT NULL DEFAULT 1,

    CONSTRAINT "cart_item_pkey" PRIMARY KEY ("sku_id","account_id")
);

-- CreateTable
CREATE TABLE "catalog"."product_spu" (
    "id" BIGSERIAL NOT NULL,
    "code" TEXT NOT NULL,
    "category_id" BIGINT NOT NULL,
    "price" DECIMAL(65,30) NOT NULL,
    "is_active" BOOLEAN NOT NULL DEFAULT true,
    "description" TEXT,

    CONSTRAINT "product_spu_pkey" PRIMARY KEY ("id")
);

-- CreateIndex
CREATE UNIQUE INDEX "account_code_key" ON "account"."account"("code");

-- CreateIndex
CREATE UNIQUE INDEX "account_email_key" ON "account"."account"("email");

-- CreateIndex
CREATE UNIQUE INDEX "product_spu_code_key" ON "catalog"."product_spu"("code");

-- CreateIndex
CREATE INDEX "product_spu_category_id_idx" ON "catalog"."product_spu"("category_id");
'''

SHOP_ITEM_DDL = '''CREATE TABLE "shop"."item" (
    "id" BIGSERIAL PRIMARY KEY,
    "name" TEXT NOT NULL,
    "price" BIGINT NOT NULL DEFAULT 0
);
'''


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "e2e: marks tests that run the whole generator against real templates"
    )


@pytest.fixture
def sample_ddl():
    return SAMPLE_DDL


@pytest.fixture
def schema_file(tmp_path):
    """Sample migration written to disk."""
    path = tmp_path / "migration.sql"
    path.write_text(SAMPLE_DDL, encoding="utf-8")
    return path


@pytest.fixture
def shop_schema_file(tmp_path):
    path = tmp_path / "shop.sql"
    path.write_text(SHOP_ITEM_DDL, encoding="utf-8")
    return path


@pytest.fixture
def bundled_templates():
    """Templates shipped with the package."""
    return Settings.bundled_template_dir()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SQLC_QUERYGEN_* variables from the host out of the tests."""
    for name in (
        "SCHEMA_FILE", "OUTPUT_DIR", "TABLE", "TEMPLATE_DIR",
        "SINGLE_FILE", "LOG_LEVEL", "LOG_FORMAT",
    ):
        monkeypatch.delenv(f"SQLC_QUERYGEN_{name}", raising=False)
