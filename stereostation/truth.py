"""Monte Carlo truth bookkeeping

The station reports the truth information of digitized and reconstructed
hits to a truth sink.  The sink is supplied by the user of the station,
:class:`BaseTruthSink` defines the operations it has to provide.
:class:`MCTruth` is a simple implementation which keeps everything in
memory.

"""
import warnings

#: Label of the (single) signal hit of an event.
SIGNAL_LABEL = -1

#: Offset added to the label of combinatorial fake (ghost) clusters.
GHOST_LABEL_OFFSET = 100000


class Cluster(object):

    """A truth or reconstructed cluster in the station"""

    def __init__(self, x, y, z, label):
        self.x = x
        self.y = y
        self.z = z
        self.label = label

    @property
    def is_ghost(self):
        return self.label >= GHOST_LABEL_OFFSET - 1

    def sort_key(self):
        return (self.label, self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Cluster):
            return NotImplemented
        return (self.x, self.y, self.z, self.label) == \
            (other.x, other.y, other.z, other.label)

    def __repr__(self):
        return ('%s(%r, %r, %r, %r)' %
                (self.__class__.__name__, self.x, self.y, self.z,
                 self.label))


class BaseTruthSink(object):

    """Base class for truth sinks.

    Subclasses have to implement all operations.

    """

    def kill_signal(self, killed):
        """Mark the signal hit of this event as lost (True) or real"""

        raise NotImplementedError

    def set_signal(self, x, y, z, label):
        """Set the digitized position and label of the signal hit"""

        raise NotImplementedError

    def set_signal_position(self, x, y):
        """Set the reconstructed position of the signal hit"""

        raise NotImplementedError

    def add_background_cluster(self, x, y, z, label):
        raise NotImplementedError

    def sort_background_clusters(self):
        raise NotImplementedError

    def reset_background_clusters(self):
        raise NotImplementedError


class MCTruth(BaseTruthSink):

    """Keep the truth information of one station in memory

    :attr signal: :class:`Cluster` of the signal hit, or None if no
        signal hit was digitized.
    :attr signal_killed: True if the signal hit was lost.
    :attr signal_reconstructed: True if a coincidence was found for the
        signal hit, the signal position is then the reconstructed one.
    :attr background: list of background :class:`Cluster` objects.

    """

    def __init__(self):
        self.signal = None
        self.signal_killed = False
        self.signal_reconstructed = False
        self.background = []

    def kill_signal(self, killed):
        self.signal_killed = killed

    def set_signal(self, x, y, z, label):
        self.signal = Cluster(x, y, z, label)
        self.signal_reconstructed = False

    def set_signal_position(self, x, y):
        self.signal.x = x
        self.signal.y = y
        self.signal_reconstructed = True

    def add_background_cluster(self, x, y, z, label):
        self.background.append(Cluster(x, y, z, label))

    def sort_background_clusters(self):
        self.background.sort(key=Cluster.sort_key)

    def reset_background_clusters(self):
        self.background = []

    def reset(self):
        """Forget all truth information, for a new event"""

        self.signal = None
        self.signal_killed = False
        self.signal_reconstructed = False
        self.reset_background_clusters()

    @property
    def ghosts(self):
        return [cluster for cluster in self.background if cluster.is_ghost]


def check_label(label):
    """Warn for truth labels which collide with ghost labels"""

    if label >= GHOST_LABEL_OFFSET - 1:
        warnings.warn('Label %d can not be told apart from ghost labels' %
                      label)
