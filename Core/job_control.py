import os

import psutil

from Core.output import write

# Background jobs: pid → command string
background_jobs = {}


def add_background_job(pid, cmdline):
    """Remember a job started with a trailing &"""
    background_jobs[pid] = cmdline
    write(f"[{pid}] started in background: {cmdline}\n")


def _finished(pid):
    cmdline = background_jobs.pop(pid, None)
    if cmdline is not None:
        write(f"[{pid}] finished: {cmdline}\n")


def poll_jobs():
    """Reap background jobs that already exited, without blocking"""
    for pid in list(background_jobs):
        try:
            done, _ = os.waitpid(pid, os.WNOHANG)
        except ChildProcessError:
            done = pid
        if done == pid:
            _finished(pid)


def reap_children():
    """
    Final collection pass: wait for every child the shell still has,
    background jobs included, so none is left a zombie.
    """
    try:
        children = psutil.Process(os.getpid()).children()
    except psutil.Error:
        children = []

    gone, _ = psutil.wait_procs(children)
    for proc in gone:
        _finished(proc.pid)

    while True:
        try:
            pid, _ = os.wait()
        except ChildProcessError:
            break
        _finished(pid)
