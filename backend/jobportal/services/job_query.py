"""Job query engine: filter planning, denormalization, counts, sort and paging.

Which predicates the store evaluates is an explicit planning step
(``plan_job_query``). Equality and value-in-set filters are pushed down; the
posted-date window and the title search are always evaluated here, after the
fetch. As soon as any "complex" filter or a search term is present the store
is not asked to order either: up to ``job_fetch_cap`` matches are fetched and
sorted in memory, and ``limit`` is applied by truncation.

Post-processing runs in a fixed order:

1. fetch (store predicates), concurrently with reference and application reads
2. denormalize reference names
3. fold applicant / selected counts
4. posted-within-days window (inclusive, ISO string comparison)
5. case-insensitive title search
6. sort by postedAt, newest first (ties by id)
7. truncate to ``limit`` when processing happened in memory
"""

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable

from jobportal.config import Settings, get_settings
from jobportal.models.application import Application, ApplicationStatus
from jobportal.models.job import Job
from jobportal.models.reference import ReferenceEntity, ReferenceKind
from jobportal.repositories.interfaces import (
    ApplicationRepository,
    JobRepository,
    JobStoreQuery,
    ReferenceRepository,
)
from jobportal.schemas.job import DashboardJobs, JobListItem, JobRead, JobSummary
from jobportal.services.timestamps import days_ago_iso, parse_iso

logger = logging.getLogger(__name__)

PLACEHOLDER = "N/A"
ANY = "all"


def _clean(value: str | None) -> str | None:
    if value is None or value == "" or value == ANY:
        return None
    return value


def _clean_list(values: Iterable[str] | None) -> list[str]:
    return [v for v in (values or []) if _clean(v) is not None]


@dataclass
class JobQuery:
    """A job list request as a caller expresses it."""

    is_referral: bool | None = None
    recruiter_id: str | None = None
    employee_id: str | None = None
    experience_level_id: str | None = None
    location_ids: list[str] = field(default_factory=list)
    domain_ids: list[str] = field(default_factory=list)
    job_type_ids: list[str] = field(default_factory=list)
    posted_within_days: int | None = None
    search_term: str | None = None
    limit: int | None = None
    dashboard_mode: bool = False
    dashboard_domain_id: str | None = None
    admin: bool = False

    @property
    def management_scoped(self) -> bool:
        """Owner and admin views always read fresh."""
        return bool(_clean(self.recruiter_id) or _clean(self.employee_id) or self.admin)


@dataclass
class JobQueryPlan:
    store_query: JobStoreQuery
    in_memory: bool
    posted_within_days: int | None
    search_term: str | None
    limit: int | None
    cacheable: bool


@dataclass
class JobListResult:
    jobs: list[JobListItem]
    cacheable: bool


@dataclass
class DashboardResult:
    jobs: DashboardJobs
    cacheable: bool


def plan_job_query(query: JobQuery, settings: Settings | None = None) -> JobQueryPlan:
    """Split a request into store predicates and in-process steps."""
    settings = settings or get_settings()
    store = JobStoreQuery()
    complex_filter = False

    if query.is_referral is not None:
        store.equals["is_referral"] = query.is_referral

    for column, value in (
        ("recruiter_id", query.recruiter_id),
        ("employee_id", query.employee_id),
        ("experience_level_id", query.experience_level_id),
    ):
        value = _clean(value)
        if value is not None:
            store.equals[column] = value
            complex_filter = True

    for column, values in (
        ("location_id", query.location_ids),
        ("domain_id", query.domain_ids),
        ("job_type_id", query.job_type_ids),
    ):
        values = _clean_list(values)
        if values:
            store.in_[column] = values
            complex_filter = True

    search_term = (query.search_term or "").strip() or None
    limit = query.limit if query.limit is not None and query.limit > 0 else None

    in_memory = complex_filter or search_term is not None
    if in_memory:
        # Native ordering next to other predicates would need a composite index
        store.limit = settings.job_fetch_cap
    else:
        store.order_by_posted = True
        store.limit = limit

    return JobQueryPlan(
        store_query=store,
        in_memory=in_memory,
        posted_within_days=query.posted_within_days,
        search_term=search_term,
        limit=limit,
        cacheable=not query.management_scoped,
    )


def _name(lookup: dict[str, ReferenceEntity], key: str | None, placeholder: str = PLACEHOLDER) -> str:
    if not key:
        return placeholder
    entity = lookup.get(str(key))
    return entity.name if entity is not None and entity.name else placeholder


def count_applications(applications: Iterable[Application]) -> dict[str, tuple[int, int]]:
    """Per-job (total, selected) counts."""
    total: Counter = Counter()
    selected: Counter = Counter()
    for application in applications:
        total[application.job_id] += 1
        if application.status_id == ApplicationStatus.SELECTED:
            selected[application.job_id] += 1
    return {job_id: (total[job_id], selected[job_id]) for job_id in total}


def within_days(jobs: list, days: int | None, now: datetime) -> list:
    if days is None:
        return jobs
    cutoff = days_ago_iso(days, now)
    return [job for job in jobs if job.posted_at >= cutoff]


def matching_title(jobs: list, search_term: str | None) -> list:
    if not search_term:
        return jobs
    needle = search_term.lower()
    return [job for job in jobs if needle in (job.title or "").lower()]


def newest_first(jobs: list) -> list:
    # id breaks ties the same way the store does
    return sorted(jobs, key=lambda job: (job.posted_at, job.id), reverse=True)


async def gather_reads(*reads):
    """Await reads concurrently and re-raise the first failure once all have settled."""
    results = await asyncio.gather(*reads, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


class JobQueryEngine:
    def __init__(
        self,
        jobs: JobRepository,
        applications: ApplicationRepository,
        references: ReferenceRepository,
        settings: Settings | None = None,
        now: Callable[[], datetime] | None = None,
    ):
        self.jobs = jobs
        self.applications = applications
        self.references = references
        self.settings = settings or get_settings()
        self._now = now or (lambda: datetime.now(timezone.utc))

    async def list_jobs(self, query: JobQuery) -> JobListResult:
        plan = plan_job_query(query, self.settings)
        now = self._now()

        (
            rows,
            applications,
            locations,
            domains,
            job_types,
            workplace_types,
            experience_levels,
        ) = await gather_reads(
            self.jobs.query(plan.store_query),
            self.applications.list_all(),
            self.references.lookup_map(ReferenceKind.LOCATION),
            self.references.lookup_map(ReferenceKind.DOMAIN),
            self.references.lookup_map(ReferenceKind.JOB_TYPE),
            self.references.lookup_map(ReferenceKind.WORKPLACE_TYPE),
            self.references.lookup_map(ReferenceKind.EXPERIENCE_LEVEL),
        )

        counts = count_applications(applications)
        items = []
        for row in rows:
            total, selected = counts.get(row.id, (0, 0))
            items.append(
                JobListItem(
                    **JobRead.model_validate(row).model_dump(),
                    location=_name(locations, row.location_id),
                    domain=_name(domains, row.domain_id),
                    type=_name(job_types, row.job_type_id),
                    workplace_type=_name(workplace_types, row.workplace_type_id),
                    experience_level=_name(experience_levels, row.experience_level_id),
                    applicant_count=total,
                    selected_applicant_count=selected,
                )
            )

        if self.settings.job_expiry_enabled:
            items = [item for item in items if not self.is_expired(item, now)]

        items = within_days(items, plan.posted_within_days, now)
        items = matching_title(items, plan.search_term)
        items = newest_first(items)
        if plan.in_memory and plan.limit is not None:
            items = items[: plan.limit]

        logger.debug(
            f"Job query returned {len(items)} of {len(rows)} fetched "
            f"(in_memory={plan.in_memory}, store={plan.store_query})"
        )
        return JobListResult(jobs=items, cacheable=plan.cacheable)

    async def dashboard(self, query: JobQuery) -> DashboardResult:
        """Recommended and referral lists for the job seeker home page."""
        cap = self.settings.dashboard_fetch_cap
        domain_id = _clean(query.dashboard_domain_id)
        now = self._now()

        def store_query(is_referral: bool) -> JobStoreQuery:
            equals = {"is_referral": is_referral}
            if domain_id is not None:
                equals["domain_id"] = domain_id
            return JobStoreQuery(equals=equals, limit=cap)

        recommended_rows, referral_rows, locations, job_types = await gather_reads(
            self.jobs.query(store_query(False)),
            self.jobs.query(store_query(True)),
            self.references.lookup_map(ReferenceKind.LOCATION),
            self.references.lookup_map(ReferenceKind.JOB_TYPE),
        )

        def process(rows: list[Job]) -> list[JobSummary]:
            items = [
                JobSummary(
                    **JobRead.model_validate(row).model_dump(),
                    location=_name(locations, row.location_id),
                    type=_name(job_types, row.job_type_id),
                )
                for row in rows
            ]
            items = within_days(items, query.posted_within_days, now)
            return newest_first(items)[: self.settings.dashboard_list_size]

        jobs = DashboardJobs(recommended=process(recommended_rows), referral=process(referral_rows))
        return DashboardResult(jobs=jobs, cacheable=not query.management_scoped)

    def is_expired(self, job: JobRead, now: datetime) -> bool:
        """Referrals and recruiter postings age out; ownerless postings never do."""
        if job.employee_id:
            ttl = self.settings.referral_job_ttl_days
        elif job.recruiter_id:
            ttl = self.settings.recruiter_job_ttl_days
        else:
            return False
        age = now - parse_iso(job.posted_at)
        return age.total_seconds() / 86400 > ttl
