"""
Tests for configuration, logging, errors and health endpoints.
"""

import json
import logging

from jobly.core.config import Settings
from jobly.core.database import execute_positional
from jobly.core.errors import BadRequestError, JoblyError, NotFoundError
from jobly.core.logging_config import CustomJsonFormatter, setup_logging


class TestSettings:

    def test_cors_origins_from_json(self):
        settings = Settings(BACKEND_CORS_ORIGINS='["http://a.test", "http://b.test"]')

        assert settings.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_cors_origins_from_comma_list(self):
        settings = Settings(BACKEND_CORS_ORIGINS="http://a.test, http://b.test")

        assert settings.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_database_url_from_parts(self):
        settings = Settings(
            DATABASE_URL_OVERRIDE=None,
            POSTGRES_USER="jobly",
            POSTGRES_PASSWORD="secret",
            POSTGRES_SERVER="db",
            POSTGRES_PORT="5433",
            POSTGRES_DB="jobly_test",
        )

        assert settings.DATABASE_URL == "postgresql://jobly:secret@db:5433/jobly_test"

    def test_database_url_override(self):
        settings = Settings(DATABASE_URL_OVERRIDE="sqlite:///./jobly.db")

        assert settings.DATABASE_URL == "sqlite:///./jobly.db"


class TestLogging:

    def teardown_method(self):
        setup_logging("WARNING", json_logs=False)

    def test_json_logs(self):
        setup_logging("DEBUG", json_logs=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)

    def test_json_record_fields(self):
        formatter = CustomJsonFormatter('%(message)s')
        record = logging.LogRecord("jobly.test", logging.WARNING, __file__, 10, "careful", None, None)

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "careful"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "jobly.test"
        assert payload["line"] == 10

    def test_plain_logs(self):
        setup_logging("INFO", json_logs=False)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, CustomJsonFormatter)


class TestErrors:

    def test_status_codes(self):
        assert BadRequestError().status == 400
        assert NotFoundError().status == 404
        assert JoblyError("boom").status == 500
        assert JoblyError("teapot", 418).status == 418

    def test_error_is_rendered_as_json(self, client, seeded):
        response = client.get("/companies/missing")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "No company: missing", "status": 404}}

    def test_body_validation_is_bad_request(self, client, seeded):
        response = client.patch("/companies/c1", json={"numEmployees": -1})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["status"] == 400
        assert error["message"].startswith("numEmployees:")

    def test_path_validation_is_bad_request(self, client, seeded):
        response = client.delete("/jobs/not-a-number")

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("path.job_id:")


class TestPositionalExecution:

    def test_placeholders_are_bound_in_order(self, db_session, seeded):
        result = execute_positional(
            db_session,
            "SELECT handle FROM companies WHERE num_employees BETWEEN $1 AND $2 ORDER BY handle",
            [2, 3],
        )

        assert [row.handle for row in result] == ["c2", "c3"]

    def test_double_digit_placeholders(self, db_session, seeded):
        values = list(range(1, 12))
        sql = "SELECT " + ", ".join(f"${i}" for i in range(1, 12))

        row = execute_positional(db_session, sql, values).one()

        assert list(row) == values


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health(self, client, seeded):
        response = client.get("/health/detailed")

        database = response.json()["checks"]["database"]
        assert database["status"] == "healthy"
        assert database["counts"] == {"companies": 3, "jobs": 3, "users": 2}
