from http import HTTPStatus

import launch


def test_only_failed_requests_are_logged():
    assert launch.should_log(404)
    assert launch.should_log("500")
    assert launch.should_log(HTTPStatus.NOT_FOUND)
    assert not launch.should_log(200)
    assert not launch.should_log(HTTPStatus.NOT_MODIFIED)
    assert not launch.should_log("-")
    assert launch.should_log("weird")


def test_missing_page_exits_with_error(tmp_path):
    assert launch.main([str(tmp_path)]) == 1
