from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


@contextmanager
def open_log_lines(path: str | Path) -> Iterator[Iterator[str]]:
    """
    로그 파일을 줄 단위로 읽는 컨텍스트 매니저
    예: with open_log_lines(p) as lines: for line in lines: ...
    - 줄 끝 개행(\\n, \\r\\n) 제거
    - 깨진 바이트는 치환(replace)해서 계속 읽음
    - 정상 종료/예외 모두 파일 핸들은 닫힌다
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        yield (line.rstrip("\r\n") for line in f)
