import os

import pytest

from Core import job_control


@pytest.fixture(autouse=True)
def clean_jobs():
    """Background job table is module state, start and end every test empty"""
    job_control.background_jobs.clear()
    yield
    for pid in list(job_control.background_jobs):
        try:
            os.waitpid(pid, 0)
        except ChildProcessError:
            pass
    job_control.background_jobs.clear()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary directory"""
    monkeypatch.chdir(tmp_path)
    return tmp_path
