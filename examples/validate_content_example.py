"""
Example validating the sample content tree.

Run from the repository root:
    python examples/validate_content_example.py
"""

from pathlib import Path

from postlint import ContentValidator, ValidatorConfig

CONTENT_DIR = Path(__file__).parent / "content"


def main():
    validator = ContentValidator(ValidatorConfig(max_description_length=160))
    report = validator.validate_tree(CONTENT_DIR)

    for finding in report.findings:
        print(finding)

    print(
        f"{report.posts_checked} post(s) and {report.partials_checked} partial(s) checked, "
        f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    )


if __name__ == "__main__":
    main()
