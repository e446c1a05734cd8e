import unittest
from datetime import datetime

from app.core.hb_status import HBStatus
from app.core.status_steps.record import StatusRecord
from app.core.status_steps.tracker import fold_line, fold_lines, replay

MARKER = "[02:56:22] Starting encode of /Users/me/TV/NEXTGEN_S07_E04.m4v"
CHAPTERS = "[02:56:23] scan: title 4 has 6 chapters"
ENCODE = "[02:56:25] Starting Task: Encoding Pass"
PROGRESS_1 = '[02:58:25] sync: "Chapter 2" (2) at frame 2880 time 10800000'
PROGRESS_2 = '[02:59:25] sync: "Chapter 3" (3) at frame 5760 time 21600000'


class TestFold(unittest.TestCase):
    def test_initial_record(self):
        r = StatusRecord()
        self.assertEqual(r.status_text, HBStatus.QUEUE_COMPLETE)
        self.assertEqual(r.num_chapters, -1)
        self.assertEqual(r.eta_estimators, ())
        self.assertEqual((r.current_encode, r.start_time, r.end_time, r.eta), ("", "", "", ""))

    def test_fold_is_pure(self):
        r = StatusRecord()
        out = fold_line(r, MARKER)
        self.assertEqual(r, StatusRecord())
        self.assertIsNot(out, r)

    def test_marker_starts_encode(self):
        r = fold_line(StatusRecord(), MARKER)
        self.assertEqual(r.status_text, HBStatus.RIPPING)
        self.assertEqual(r.start_time, "02:56:22")
        self.assertEqual(r.current_encode, "NEXTGEN_S07_E04")

    def test_indicators_accumulate(self):
        r = fold_lines([MARKER, CHAPTERS, ENCODE, PROGRESS_1, PROGRESS_2])
        self.assertEqual(r.num_chapters, 6)
        self.assertEqual(r.eta_estimators, (PROGRESS_1, PROGRESS_2))
        self.assertEqual(r.status_text, HBStatus.RIPPING_ENCODING)
        self.assertEqual(r.eta, "~")

    def test_last_chapter_count_wins(self):
        r = fold_lines([MARKER, CHAPTERS, "[02:56:24] scan: title 4 has 9 chapters"])
        self.assertEqual(r.num_chapters, 9)

    def test_unmatched_lines_are_inert(self):
        before = fold_lines([MARKER, CHAPTERS, ENCODE, PROGRESS_1])
        after = fold_lines(["[03:00:00] encx264: keyint: 240", "garbage", ""], before)
        self.assertEqual(after, before)

    def test_ripping_without_marker_keeps_samples(self):
        before = fold_lines([MARKER, CHAPTERS, ENCODE, PROGRESS_1, PROGRESS_2])
        after = fold_line(before, "[03:00:00] scan: scanning title 4")
        self.assertEqual(after.status_text, HBStatus.RIPPING)
        self.assertEqual(after.eta_estimators, before.eta_estimators)
        self.assertEqual(after.current_encode, "NEXTGEN_S07_E04")

    def test_new_marker_resets_previous_job(self):
        r = fold_lines([
            MARKER, CHAPTERS, ENCODE, PROGRESS_1,
            "[03:08:29] Finished work at: Mon Jan 08 03:08:29 2018",
            "[03:10:00] Starting encode of /Users/me/TV/NEXTGEN_S07_E05.m4v",
        ])
        self.assertEqual(r.current_encode, "NEXTGEN_S07_E05")
        self.assertEqual(r.start_time, "03:10:00")
        self.assertEqual(r.end_time, "")
        self.assertEqual(r.num_chapters, -1)
        self.assertEqual(r.eta_estimators, ())

    def test_scan_mid_encode_resets_record(self):
        r = fold_lines([
            MARKER, CHAPTERS, ENCODE, PROGRESS_1, PROGRESS_2,
            "[03:06:00] hb_scan: path=/Volumes/ST_NEXTGEN_D2, title_index=0",
        ])
        self.assertEqual(r.status_text, HBStatus.SCANNING)
        self.assertEqual(r.num_chapters, -1)
        self.assertEqual(r.eta_estimators, ())
        self.assertEqual(r.current_encode, "")
        self.assertEqual(r.start_time, "")
        self.assertEqual(r.end_time, "")

        r = fold_line(r, "[03:07:00] Starting encode of /Users/me/TV/NEXTGEN_S07_E05.m4v")
        self.assertEqual(r.current_encode, "NEXTGEN_S07_E05")
        self.assertEqual(r.eta_estimators, ())


class TestReplay(unittest.TestCase):
    def test_snatched_scenario(self):
        lines = [
            "[23:40:10] libhb: scan thread found 2 valid title(s)",
            "[23:55:58] Starting encode of /Users/me/Movies/Snatched.m4v",
            "[00:34:57] Finished work at: Sun Jun 18 00:34:57 2017",
        ]
        r = replay(lines, now=datetime(2017, 6, 18, 1, 0, 0))
        self.assertEqual(r.current_encode, "Snatched")
        self.assertEqual(r.start_time, "23:55:58")
        self.assertEqual(r.end_time, "00:34:57")
        self.assertEqual(r.status_text, HBStatus.QUEUE_COMPLETE)
        self.assertEqual(r.status, "Queue complete")
        self.assertEqual(r.eta, "00:00:00")

    def test_empty_log_looks_idle(self):
        r = replay([])
        self.assertEqual(r.status_text, HBStatus.QUEUE_COMPLETE)
        self.assertEqual(r.eta, "00:00:00")
        self.assertEqual(r.current_encode, "")

    def test_two_samples_exact_finish(self):
        lines = [
            MARKER,
            "[02:56:23] scan: title 4 has 5 chapters",
            ENCODE,
            "[03:00:00] sync: \"Chapter 2\" (2) at frame 2880 time 10800000",
            "[03:01:00] sync: \"Chapter 3\" (3) at frame 5760 time 21600000",
        ]
        r = replay(lines, now=datetime(2018, 1, 8, 3, 4, 0))
        self.assertEqual(r.num_chapters, 5)
        self.assertEqual(r.eta, "00:00:00")

    def test_to_dict_is_flat(self):
        d = replay([MARKER, CHAPTERS, ENCODE, PROGRESS_1]).to_dict()
        self.assertEqual(set(d), {
            "currentEncode", "startTime", "endTime", "statusText",
            "status", "numChapters", "etaEstimators", "eta",
        })
        self.assertEqual(d["statusText"], "RIPPING_ENCODING")
        self.assertEqual(d["etaEstimators"], [PROGRESS_1])
        self.assertEqual(d["eta"], "~")


if __name__ == "__main__":
    unittest.main()
