"""Terminal I/O and the story text shown between battles."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from enum import Enum
from typing import Callable, Optional, TextIO

from .player import Player

PRESS_ANY_KEY = "(계속하려면 아무 키나 누르세요...)\n"
TYPING_DELAY = 0.001


def _isatty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Console:
    """Reads keys and lines and writes text, on a terminal or on streams."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        inp: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        typing_delay: float = TYPING_DELAY,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.inp = inp if inp is not None else sys.stdin
        self.typing_delay = typing_delay
        self._sleep = sleep

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def read_key(self) -> str:
        """Read a single key press; raise EOFError when input has ended."""
        if _isatty(self.inp):
            key = self._read_terminal_key()
        else:
            key = self.inp.read(1)
        if not key:
            raise EOFError("input ended")
        return key

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and read one line without its line ending."""
        if prompt:
            self.write(prompt)
        line = self.inp.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\r\n")

    def clear(self) -> None:
        """Clear the screen when writing to a terminal."""
        if not _isatty(self.out):
            return
        if os.name == "nt":
            subprocess.run(["cmd", "/c", "cls"], check=False)
        else:
            self.write("\033[2J\033[H")

    def pause(self, seconds: float) -> None:
        self._sleep(seconds)

    def _read_terminal_key(self) -> str:
        if os.name == "nt":
            import msvcrt

            key = msvcrt.getwch()
        else:
            import termios
            import tty

            fd = self.inp.fileno()
            saved = termios.tcgetattr(fd)
            try:
                tty.setraw(fd)
                key = os.read(fd, 1).decode(errors="replace")
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        if key == "\x03":
            raise KeyboardInterrupt
        return key


def print_line(console: Console, line: str) -> None:
    """Write ``line`` one character at a time, then end the line."""
    for char in line:
        console.write(char)
        console.pause(console.typing_delay)
    console.write("\n")


def _tell(console: Console, lines) -> None:
    for line in lines:
        print_line(console, line)
    console.write(PRESS_ANY_KEY)
    console.read_key()


def print_start_story(console: Console, player: Player) -> None:
    _tell(console, (
        "오늘은 " + player.name + "이(가) 속한 대학교의 기말고사의 마지막 날이다.",
        player.name + "는 오늘 무려 3개의 시험을 치지만 공부를 하지 않아 시험을 망칠 위기에 처하게 되는데",
        "전날 부랴부랴 벼락치기를 했지만 결국 공부를 다 마치치 못한체 학교로 향하게 되는데....",
    ))


def print_boss_encounter_story(console: Console, player: Player) -> None:
    _tell(console, (
        "교실로 들어가 자리에 앉으니 교수님이 시험지를 들고 다가옵니다.",
        "이 문제들을 풀 수 있겠나, " + player.name + "?",
        "전투가 시작됩니다!",
    ))


def print_win_story(console: Console, player: Player) -> None:
    _tell(console, (
        "축하합니다! 시험을 통과했습니다!",
        "교수님은 시험지를 걷어가며 만족한 듯 미소를 짓습니다.",
        "교수님 : \"시험공부를 많이 했나보군.\"",
    ))


def print_lose_story(console: Console, player: Player) -> None:
    _tell(console, (
        "아쉽게도 시험에서 패배했습니다...",
        "교수님이 시험지를 걷어가며 만족하지 못한듯 표정을 찡그립니다.",
        "교수님 : \"이 쉬운 시험을 통과를 못하다니....\"",
    ))


class Ending(Enum):
    """The possible endings, each with its narration and title."""

    PERFECT = (
        "해피엔딩 : 완벽한 기말고사!",
        (
            "어려웠지만 놀랍게도 모든 시험에서 만점을 받았습니다!",
            "모든 시험에서 만점을 받은 당신에게 교수님들의 문자가 쏟아집니다.",
        ),
    )
    ORDINARY = (
        "엔딩1 : 무난한 기말고사",
        (
            "아주 어려운 시험이었지만, 3과목 모두 생각보다 잘 쳤습니다.",
            "A도 받고, B도 받고.... 인생이란 다 그런거죠.",
            "다음 학기엔 만점을 노리며 다시 공부를 시작합니다....",
        ),
    )
    BARELY = (
        "엔딩2 : 평범하게 못친 기말고사",
        (
            "교수님의 자비 덕분일까요, 학사경고를 받을 뻔 했지만",
            "간신히 시험에 통과하였습니다....",
            "다음엔 좀 더 공부를 열심히 하길....",
        ),
    )
    EXPELLED = (
        "배드엔딩 : 학사경고 3회, 제적통보.",
        (
            "장학금은 커녕 수업에 출석한 횟수도 가물가물 합니다.",
            "교수님의 연민도, 눈치도 더 이상 통하지 않았습니다.",
            "결국 조용히 학교를 떠나야 했습니다....",
        ),
    )

    def __init__(self, title: str, lines: tuple) -> None:
        self.title = title
        self.lines = lines


def ending_for(average_gpa: float) -> Ending:
    """Pick the ending that a final grade average earns."""
    if average_gpa >= 4.0:
        return Ending.PERFECT
    if average_gpa >= 3.0:
        return Ending.ORDINARY
    if average_gpa >= 2.0:
        return Ending.BARELY
    return Ending.EXPELLED


def show_ending(console: Console, player: Player) -> Ending:
    """Show the final grade and the ending it leads to."""
    console.clear()
    average = player.average_gpa(0)
    console.write("====================\n")
    console.write(f"최종 학점 : {average:.2f}\n")
    console.write("====================\n")
    print_line(console, "시험이 끝났습니다.....")
    ending = ending_for(average)
    for line in ending.lines:
        print_line(console, line)
    console.write("\n")
    console.pause(1.5)
    print_line(console, ending.title)
    print_line(console, "")
    return ending