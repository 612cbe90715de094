"""LangChain tools exposing the review capabilities to the agent."""

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from code_review_agent.commit_message.domain.value_objects import DEFAULT_MAX_LENGTH
from code_review_agent.commit_message.services.commit_message_service import (
    CommitMessageService,
)
from code_review_agent.git.services.git_service import GitService
from code_review_agent.reports.services.report_service import ReportService

GET_FILE_CHANGES_TOOL = "get_file_changes_in_directory"
GENERATE_COMMIT_MESSAGE_TOOL = "generate_commit_message"
WRITE_MARKDOWN_FILE_TOOL = "write_markdown_file"


class FileChangesInput(BaseModel):
    """Arguments of the change-reading tool."""

    root_dir: str = Field(min_length=1, description="The root directory")


class CommitMessageInput(BaseModel):
    """Arguments of the commit message tool."""

    root_dir: str = Field(
        min_length=1, description="The root directory to analyze for commit message"
    )
    max_length: int = Field(
        default=DEFAULT_MAX_LENGTH,
        gt=0,
        description=f"Maximum length of commit message (default: {DEFAULT_MAX_LENGTH})",
    )


class MarkdownWriteInput(BaseModel):
    """Arguments of the report-writing tool."""

    content: str = Field(min_length=1, description="The markdown content to write")
    filename: str = Field(min_length=1, description="The filename for the markdown file")
    directory: str = Field(
        default=".",
        description="The directory to write the file to (default: current directory)",
    )


def create_review_tools(
    git_service: GitService,
    commit_message_service: CommitMessageService,
    report_service: ReportService,
) -> list[StructuredTool]:
    """
    Create the tools the review agent may call.

    Args:
        git_service: Service for reading pending changes
        commit_message_service: Service for suggesting commit messages
        report_service: Service for writing review reports

    Returns:
        List of tools, in the order they are offered to the model
    """

    def get_file_changes_in_directory(root_dir: str) -> list[dict[str, str]]:
        """Get the pending changes of a directory with their diffs."""
        return [change.to_dict() for change in git_service.get_changes(root_dir)]

    def generate_commit_message(root_dir: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
        """Suggest a commit message for the pending changes of a directory."""
        return commit_message_service.generate_commit_message(root_dir, max_length=max_length)

    def write_markdown_file(content: str, filename: str, directory: str = ".") -> dict[str, object]:
        """Write a review to a markdown file."""
        return report_service.write_report(content, filename, directory).to_dict()

    return [
        StructuredTool.from_function(
            func=get_file_changes_in_directory,
            name=GET_FILE_CHANGES_TOOL,
            description="Gets the code changes made in the given directory",
            args_schema=FileChangesInput,
        ),
        StructuredTool.from_function(
            func=generate_commit_message,
            name=GENERATE_COMMIT_MESSAGE_TOOL,
            description="Generates a commit message based on the changes in the given directory",
            args_schema=CommitMessageInput,
        ),
        StructuredTool.from_function(
            func=write_markdown_file,
            name=WRITE_MARKDOWN_FILE_TOOL,
            description="Writes content to a markdown file with a header and timestamp",
            args_schema=MarkdownWriteInput,
        ),
    ]
