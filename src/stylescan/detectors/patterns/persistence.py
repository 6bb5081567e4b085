"""Database and persistence detection patterns.

Covers JPA, JDBI, migrations (Flyway, Liquibase), connection pooling and
DAO conventions.
"""

from stylescan.detectors.patterns import GROUP_PERSISTENCE, Detector

PERSISTENCE_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_PERSISTENCE,
        key="jpa",
        pattern=r"@(Entity|Repository|Table|Column)\b|javax\.persistence",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="flyway",
        pattern=r"\bflyway\b|V[0-9]+.*\.sql",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="hikari",
        pattern=r"HikariDataSource|HikariCP",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="jdbi",
        pattern=r"org\.jdbi|@(SqlQuery|SqlUpdate|RegisterRowMapper|UseRowMapper)\b",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="transactions",
        pattern=r"executeInTransaction|@Transaction\b|useTransaction|inTransaction",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="liquibase",
        pattern=r"\bliquibase\b|changeset|JdbiLiquibase",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="connection_pool",
        pattern=r"HikariConfig|maximumPoolSize|minimumIdle|connectionTimeout",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="dao_patterns",
        pattern=r"\bDao\b.*interface|SqlObject",
    ),
    Detector(
        group=GROUP_PERSISTENCE,
        key="row_mappers",
        pattern=r"RowMapper|ResultSetMapper|@RegisterRowMapper",
    ),
]
