# python3.6

# ----------------------------------------------------------------------------------
#
#                             `_`     `_,_`  _'                                  `,`
#                            -#@@- >O#@@@@u B@@>                                 8@E
#    :)ilc}` `=|}uccccVu}r"   VQz `@@#Mhzk= |8M   `=v}ucccccuY),    `~v}uVVcccccV#@$
#  ^Q@#EMqK.I#@QRdMqqMdRQ@@Q, Q@B `@@BqqqW^ W@@` e@@QRdMMMMbEQ@@8: i#@BOMqqqqqqqM#@$
#  D@@`    )@@x          <@@T Q@B `@@q      W@@`>@@l          :@@z`#@d           Q@$
#  D@#     ?@@@##########@@@} Q@B `@@q      W@@`^@@@##########@@@y`#@W           Q@$
#  0@#     )@@d!::::::::::::` Q@B `@@M      W@@`<@@E!::::::::::::``#@b          `B@$
#  D@#     `m@@#bGPP}         Q@B `@@q      W@@` 3@@BbPPPV         y@@QZPPPPPGME#@8=
#  *yx       .*icywwv         )yv  }y>      ~yT   .^icywyL          .*]uywwwwycL^-
#
#      (c) 2021 Reified Ltd.   W: www.reified.co.uk    E: sales@reified.co.uk
#
# ----------------------------------------------------------------------------------
#
# Classes for chronology-related concepts. A Chronograph (a stopwatch that
# accumulates time over any number of start/stop intervals) and a CountdownTimer.
#
# ----------------------------------------------------------------------------------
#
# Usage example:
#
#     import chronos
#
#     watch = chronos.Chronograph()
#
#     watch.start()          # returns the time accumulated so far (0.0).
#     time.sleep(1)
#     watch.stop()           # returns ~1.0, the watch is now paused.
#
#     watch.start()          # resumes, returning ~1.0.
#     watch.elapsed()        # time so far, without stopping.
#
#     watch.restart()        # returns the total and starts again from zero.
#     watch.reset()          # returns the total and leaves the watch stopped at zero.
#
# ----------------------------------------------------------------------------------

import time
import logging

from enum import Enum

####################################################################################
#
# class Status
#
####################################################################################

class Status(Enum):
	INITIAL = 1
	RUNNING = 2
	STOPPED = 3

####################################################################################
#
# class StateAlreadyRunning
#
####################################################################################

class StateAlreadyRunning(Exception):

	def __init__(self, message = "Already running."):
		super().__init__(message)

####################################################################################
#
# class Chronograph
#
####################################################################################

class Chronograph:

	################################################################################
	#
	# __init__(self, clock, loggingLevel)
	#
	################################################################################

	def __init__(self, clock = time.monotonic, loggingLevel = logging.NOTSET):

		self._debugLevel = loggingLevel
		self._logger = logging.getLogger('Chronograph')
		self._logger.setLevel(self._debugLevel)

		# The clock must never go backwards (so not time.time()).

		self._clock = clock

		# The pivot is the clock reading at which the current interval began,
		# and is None whenever we are not running. The accumulated duration
		# covers completed intervals only. The status is derived from the two.

		self._pivot = None
		self._accumulated = 0.0

	################################################################################
	#
	# start(self)
	#
	################################################################################

	def start(self) -> float:

		now = self._clock()

		if (self._pivot is not None):
			self._logger.debug("Attempt to start() when already running.")
			raise StateAlreadyRunning()

		self._begin(now)

		return self._accumulated

	################################################################################
	#
	# tryStart(self)
	#
	################################################################################

	def tryStart(self) -> bool:

		success = (self._pivot is None)

		if (success):
			self._begin(self._clock())

		return success

	################################################################################
	#
	# stop(self)
	#
	################################################################################

	def stop(self) -> float:

		# Stopping when not running is harmless, it just reports the total.

		now = self._clock()

		if (self._pivot is not None):
			self._accumulated += now - self._pivot
			self._pivot = None
			self._logger.debug(f"Stopped at {self._accumulated:.6f}s.")

		return self._accumulated

	################################################################################
	#
	# elapsed(self)
	#
	################################################################################

	def elapsed(self) -> float:

		now = self._clock()

		return self._total(now)

	################################################################################
	#
	# reset(self)
	#
	################################################################################

	def reset(self) -> float:

		now = self._clock()

		total = self._total(now)

		self._pivot = None
		self._accumulated = 0.0

		self._logger.debug(f"Reset from {total:.6f}s.")

		return total

	################################################################################
	#
	# restart(self)
	#
	################################################################################

	def restart(self) -> float:

		# After reset() we're never running, so we can begin directly.

		total = self.reset()
		self._begin(self._clock())

		return total

	################################################################################
	#
	# state(self)
	#
	################################################################################

	def state(self) -> Status:

		if (self._pivot is not None):
			return Status.RUNNING

		return Status.INITIAL if (self._accumulated == 0.0) else Status.STOPPED

	################################################################################
	#
	# isRunning(self)
	#
	################################################################################

	def isRunning(self) -> bool:

		return self._pivot is not None

	################################################################################
	#
	# _begin(self, now)
	#
	################################################################################

	def _begin(self, now):

		self._pivot = now
		self._logger.debug(f"Started from {self._accumulated:.6f}s.")

	################################################################################
	#
	# _total(self, now)
	#
	################################################################################

	def _total(self, now):

		if (self._pivot is None):
			return self._accumulated

		return self._accumulated + (now - self._pivot)

####################################################################################
#
# class CountdownTimer
#
####################################################################################

class CountdownTimer:

	################################################################################
	#
	# __init__(self, interval, clock, loggingLevel)
	#
	################################################################################

	def __init__(self, interval, clock = time.monotonic, loggingLevel = logging.NOTSET):

		self._debugLevel = loggingLevel
		self._logger = logging.getLogger('CountdownTimer')
		self._logger.setLevel(self._debugLevel)

		self._chronograph = Chronograph(clock = clock, loggingLevel = loggingLevel)
		self._period = _validPeriod(interval)

	def start(self):
		self._chronograph.start()
		self._logger.debug(f"Counting down {self.remaining():.6f}s of {self._period:.6f}s.")

	def stop(self):
		self._chronograph.stop()

	def remaining(self) -> float:
		timeSpent = self._chronograph.elapsed()
		timeLeft = self._period - timeSpent
		return timeLeft if (timeLeft > 0.0) else 0.0

	def hasExpired(self) -> bool:
		return self._chronograph.elapsed() >= self._period

	def period(self, interval):
		self._period = _validPeriod(interval)
		self._logger.debug(f"Set period to {self._period:.6f}s.")

	def restart(self):
		self._chronograph.restart()

	def reset(self):
		self._chronograph.reset()

####################################################################################
#
# _validPeriod(interval)
#
####################################################################################

def _validPeriod(interval):

	if (interval < 0):
		raise ValueError(f"Invalid countdown period {interval}")

	return float(interval)
