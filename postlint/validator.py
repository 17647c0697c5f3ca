"""Content validator"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from postlint.author_partial import AuthorPartial
from postlint.checks import (
    AuthorAccessorCheck,
    CodeBlockCheck,
    ContentCheck,
    DescriptionCheck,
    DuplicateTitleCheck,
    HyperlinkCheck,
    RequiredFieldsCheck,
)
from postlint.checks.hyperlink_check import DEFAULT_SCHEMES
from postlint.content_reader import JSON_SUFFIXES, YAML_SUFFIXES, ContentReader
from postlint.entities import Finding, Post, Severity
from postlint.entity_mapper import EntityMapper
from postlint.errors import ConfigError, ContentReadError
from postlint.report_context import ValidationContext

logger = logging.getLogger(__name__)

READ_ERROR_CODE = "PL000"


class ValidatorConfig(BaseModel):
    """Configuration options for ContentValidator"""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    checks: list[ContentCheck] | None = Field(
        default=None, description="Check instances to run; None runs the default set"
    )
    disabled_checks: list[str] = Field(
        default_factory=list, description="Codes of checks to skip"
    )
    max_description_length: int = Field(default=300, ge=1)
    allowed_link_schemes: list[str] = Field(default_factory=lambda: list(DEFAULT_SCHEMES))
    post_suffixes: list[str] = Field(default_factory=lambda: [*YAML_SUFFIXES, *JSON_SUFFIXES])
    partial_glob: str = "_author*"

    def default_checks(self) -> list[ContentCheck]:
        return [
            RequiredFieldsCheck(),
            DescriptionCheck(max_length=self.max_description_length),
            CodeBlockCheck(),
            HyperlinkCheck(allowed_schemes=self.allowed_link_schemes),
            DuplicateTitleCheck(),
            AuthorAccessorCheck(),
        ]

    def enabled_checks(self) -> list[ContentCheck]:
        """Return the checks to run, without the disabled ones"""
        checks = self.checks if self.checks is not None else self.default_checks()
        disabled = {code.upper() for code in self.disabled_checks}
        return [check for check in checks if check.code.upper() not in disabled]

    @classmethod
    def from_file(cls, path: Path | str) -> "ValidatorConfig":
        """Load configuration overrides from a YAML file"""
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"{path}: {exc.strerror or exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path}: invalid YAML: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping of settings")
        if "checks" in data:
            raise ConfigError(f"{path}: 'checks' cannot be set from a file, use 'disabled_checks'")

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"{path}: {exc}") from exc


class ValidationReport(BaseModel):
    """Outcome of validating a content tree"""

    findings: list[Finding] = Field(default_factory=list)
    posts_checked: int = 0
    partials_checked: int = 0

    @property
    def errors(self) -> list[Finding]:
        return [finding for finding in self.findings if finding.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [finding for finding in self.findings if finding.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def is_clean(self, strict: bool = False) -> bool:
        """Whether the run passes; strict mode also fails on warnings"""
        if strict:
            return not self.findings
        return not self.has_errors


class ContentValidator:
    """Validator running content checks over posts and the author partial.

    Usage:
        validator = ContentValidator()
        report = validator.validate_tree(Path("content"))
        for finding in report.findings:
            print(finding)
    """

    def __init__(self, config: ValidatorConfig | None = None):
        self.config = config or ValidatorConfig()
        self.checks = self.config.enabled_checks()

        # Composition: Inject dependencies
        self.reader = ContentReader()
        self.entity_mapper = EntityMapper(Post)

    @staticmethod
    def _emit(check: str, findings: list[Finding]) -> list[Finding]:
        for finding in findings:
            ValidationContext.record(finding, check)
        return findings

    def _run(self, hook: str, subject) -> list[Finding]:
        findings = []
        for check in self.checks:
            findings.extend(self._emit(type(check).__name__, getattr(check, hook)(subject)))
        return findings

    def load_post(self, path: Path) -> Post:
        """Read and map a post artifact"""
        document = self.reader.read_document(path)
        return self.entity_mapper.map_document_to_entity(document, path)

    def load_partial(self, path: Path) -> AuthorPartial:
        """Read an author partial template"""
        return AuthorPartial.from_text(self.reader.read_text(path), source=path)

    def validate_post(self, post: Post) -> list[Finding]:
        """Run the per-post checks on one post"""
        return self._run("check_post", post)

    def validate_posts(self, posts: list[Post]) -> list[Finding]:
        """Run the per-post checks on each post, then the collection checks"""
        findings = []
        for post in posts:
            findings.extend(self.validate_post(post))
        findings.extend(self._run("check_posts", posts))
        return findings

    def validate_partial(self, partial: AuthorPartial) -> list[Finding]:
        """Run the partial checks on an author partial"""
        return self._run("check_partial", partial)

    def _read_failure(self, error: ContentReadError) -> Finding:
        finding = Finding(
            code=READ_ERROR_CODE,
            severity=Severity.ERROR,
            message=error.reason,
            source=str(error.path),
        )
        self._emit("ContentReader", [finding])
        return finding

    def validate_tree(self, root: Path | str, exclude: list[Path] | None = None) -> ValidationReport:
        """Discover, load and check every artifact below root.

        Unreadable or malformed artifacts become findings; the rest of the
        tree is still checked. Paths in exclude are never read.
        """
        root = Path(root)
        post_paths, partial_paths = self.reader.discover(
            root, self.config.post_suffixes, self.config.partial_glob, exclude or []
        )
        logger.info("Validating %d post(s) and %d partial(s) in %s", len(post_paths), len(partial_paths), root)

        report = ValidationReport()
        posts = []
        for path in post_paths:
            try:
                posts.append(self.load_post(path))
            except ContentReadError as exc:
                logger.warning("Skipping unreadable post: %s", exc)
                report.findings.append(self._read_failure(exc))

        report.findings.extend(self.validate_posts(posts))
        report.posts_checked = len(posts)

        for path in partial_paths:
            try:
                partial = self.load_partial(path)
            except ContentReadError as exc:
                logger.warning("Skipping unreadable partial: %s", exc)
                report.findings.append(self._read_failure(exc))
                continue
            report.findings.extend(self.validate_partial(partial))
            report.partials_checked += 1

        logger.info(
            "Validation finished: %d error(s), %d warning(s)",
            len(report.errors),
            len(report.warnings),
        )
        return report
