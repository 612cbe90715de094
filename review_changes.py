#!/usr/bin/env python3
"""
Script to review the pending changes of a git working tree with an LLM agent.

The review is streamed to stdout. The agent can read the changes, suggest a
commit message and save its review to a markdown file. Configuration comes
from the environment and the .env file (see .env.example).
"""

import logging
import sys

from code_review_agent.commit_message.services.commit_message_service import (
    CommitMessageService,
)
from code_review_agent.git.repositories.implementations import GitRepositoryImpl
from code_review_agent.git.services.git_service import GitService
from code_review_agent.reports.repositories.implementations import (
    FileSystemReportRepositoryImpl,
)
from code_review_agent.reports.services.report_service import ReportService
from code_review_agent.review.domain.value_objects import AgentConfig
from code_review_agent.review.repositories.factory import (
    create_review_agent,
    load_agent_config,
)
from code_review_agent.review.services.review_service import ReviewService
from code_review_agent.review.tools import create_review_tools

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: AgentConfig) -> None:
    """Send log records to stderr so stdout only carries the review."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_review_service(config: AgentConfig) -> ReviewService:
    """Wire the services and tools into a review service."""
    git_service = GitService(GitRepositoryImpl())
    commit_message_service = CommitMessageService(git_service)
    report_service = ReportService(FileSystemReportRepositoryImpl())

    tools = create_review_tools(git_service, commit_message_service, report_service)
    return ReviewService(create_review_agent(config, tools))


def main() -> None:
    """Main function to load configuration and stream the review."""
    try:
        config = load_agent_config()
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config)

    try:
        review_service = build_review_service(config)
        review_service.review_directory(config.target_dir)
    except ValueError as e:
        print(f"\n✗ Configuration error: {e}", file=sys.stderr)
        print(
            "  Hint: Set LLM_PROVIDER and the matching API key in .env file or environment",
            file=sys.stderr,
        )
        sys.exit(1)
    except Exception as e:
        print(f"\n✗ Review failed: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    sys.exit(0)


if __name__ == "__main__":
    main()
