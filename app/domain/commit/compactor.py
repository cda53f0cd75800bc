"""커밋 diff를 프롬프트 길이 제한에 맞게 압축하는 모듈.

파일 헤더, 추가/삭제 라인, 일부 컨텍스트 라인을 우선 보존하고
제한을 넘으면 잘라낸 뒤 생략 안내 문구를 덧붙인다.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from app.domain.commit.schemas import ChangedFile

SECTION_HEADING = "\n\n변경된 파일들과 코드 변경사항:\n"
CODE_CHANGES_LABEL = "코드 변경사항:\n"
TRUNCATION_NOTICE = "\n(일부 파일/라인은 길이 제한으로 생략되었습니다)\n"


class CharBudget(BaseModel):
    """diff 압축 한도"""

    model_config = ConfigDict(frozen=True)

    max_chars: int = 8000
    max_lines_per_file: int = 80
    max_files: int = 20


class BudgetBuffer:
    """전체 글자 수 한도를 지키며 문자열을 누적하는 버퍼"""

    def __init__(self, max_chars: int):
        self._max_chars = max_chars
        self._parts: list[str] = []
        self._length = 0
        self.overflowed = False

    def __len__(self) -> int:
        return self._length

    def try_append(self, text: str) -> bool:
        """한도 안에 들어가면 추가하고 True, 아니면 overflowed 표시 후 False"""
        if self._length + len(text) > self._max_chars:
            self.overflowed = True
            return False
        self._parts.append(text)
        self._length += len(text)
        return True

    def getvalue(self) -> str:
        return "".join(self._parts)


def format_file_header(file: ChangedFile) -> str:
    return f"\n파일: {file.path} ({file.status}): +{file.additions} -{file.deletions}\n"


def format_patch_line(line: str) -> tuple[str, bool] | None:
    """patch 라인을 출력 형태로 변환.

    Returns:
        (출력 문자열, 라인 한도 계산 대상 여부). 분류되지 않는 라인은 None
    """
    if line.startswith("@@"):
        return f"\n[변경 영역] {line}\n", False
    if line.startswith("+"):
        return f"+ {line[1:]}\n", True
    if line.startswith("-"):
        return f"- {line[1:]}\n", True
    if line.startswith(" "):
        return f"  {line[1:]}\n", True
    if line.startswith("\\"):
        return f"  {line}\n", True
    return None


def _has_line_changes(lines: list[str]) -> bool:
    return any(line.startswith(("+", "-")) for line in lines)


def _append_patch(buffer: BudgetBuffer, patch: str, max_lines: int) -> bool:
    """파일 하나의 patch를 버퍼에 추가. 전체 한도에 걸리면 False"""
    lines = patch.split("\n")
    if not _has_line_changes(lines):
        return True

    if not buffer.try_append(CODE_CHANGES_LABEL):
        return False

    emitted = 0
    for line in lines:
        if emitted >= max_lines:
            break
        formatted = format_patch_line(line)
        if formatted is None:
            continue
        text, counted = formatted
        if not buffer.try_append(text):
            return False
        if counted:
            emitted += 1

    return True


def compact_files(files: Sequence[ChangedFile], budget: CharBudget | None = None) -> str:
    """변경 파일 목록을 길이 제한이 있는 diff 요약 문자열로 변환.

    파일 순서는 입력 순서를 따르며 `max_files`를 넘는 파일은 버린다.
    헤더나 라인을 추가하기 전에 전체 한도를 확인하므로 결과 길이는
    `max_chars + len(TRUNCATION_NOTICE)`를 넘지 않는다.

    Args:
        files: 커밋의 변경 파일 목록
        budget: 압축 한도, 없으면 기본값

    Returns:
        압축된 diff 문자열, 파일이 없으면 빈 문자열
    """
    if not files:
        return ""

    budget = budget or CharBudget()
    buffer = BudgetBuffer(budget.max_chars)
    files_dropped = len(files) > budget.max_files

    if buffer.try_append(SECTION_HEADING):
        for file in files[: budget.max_files]:
            if not buffer.try_append(format_file_header(file)):
                break
            if file.patch and not _append_patch(buffer, file.patch, budget.max_lines_per_file):
                break

    result = buffer.getvalue()
    if files_dropped or buffer.overflowed:
        result += TRUNCATION_NOTICE
    return result
