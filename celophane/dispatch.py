# standard imports
import logging
import threading

logg = logging.getLogger(__name__)


class CallThread(threading.Thread):
    """Runs a single read call, keeping either its result or the error it raised.

    :param idx: Position of the call in the join
    :type idx: int
    :param fn: Zero-argument callable
    :type fn: function
    """

    def __init__(self, idx, fn):
        super(CallThread, self).__init__()
        self.idx = idx
        self.fn = fn
        self.result = None
        self.error = None


    def run(self):
        try:
            self.result = self.fn()
        except Exception as e:
            logg.debug('call {} failed: {}'.format(self.idx, e))
            self.error = e


    def outcome(self):
        if self.error != None:
            return self.error
        return self.result


def join(calls, concurrent=True):
    """Runs independent calls and collects their outcomes.

    A failing call does not affect the others. With concurrent set to False the calls are run one after another in the order given.

    :param calls: Zero-argument callables
    :type calls: list of function
    :param concurrent: Run the calls in parallel threads
    :type concurrent: bool
    :return: Result or raised exception for each call, in the order given
    :rtype: list
    """
    threads = []
    for i, fn in enumerate(calls):
        threads.append(CallThread(i, fn))

    if concurrent:
        for t in threads:
            t.start()
        for t in threads:
            t.join()
    else:
        for t in threads:
            t.run()

    return [t.outcome() for t in threads]


def failed(outcome):
    return isinstance(outcome, Exception)
