import io
import logging

from .exceptions import ShortReadException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: mainly we need a read_exact() method
    that either returns all the bytes requested or complains.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self._owned = False
        self.obj = obj
        self.history = []

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __del__(self):
        # only what we opened ourselves is ours to close
        if self.__dict__.get('_owned'):
            self.obj.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_file(self):
        if not (hasattr(self.obj, 'read') or hasattr(self.obj, 'write')):
            raise ValueError('\'%s\' is the wrong kind of object to use as a stream' % self._type.__name__)

    def seekable(self):
        return bool(getattr(self.obj, 'seekable', lambda: False)())

    def read_exact(self, n):
        '''Read exactly n bytes.

        Some sources (pipes, sockets, raw files) can return less than
        asked even if more data is coming, so we loop until EOF.

        On a short read the position is restored when the source is
        seekable, otherwise the bytes consumed are lost.'''
        if self.seekable():
            self.save()

        data = b''
        try:
            while len(data) < n:
                chunk = self.obj.read(n - len(data))
                if not chunk:
                    break
                data += chunk
        except OSError:
            if self.seekable():
                self.restore()
            raise

        if len(data) != n:
            logger.debug('short read: wanted %d bytes, got %d' % (n, len(data)))
            if self.seekable():
                self.restore()
            raise ShortReadException(chain=[], got=len(data))

        if self.seekable():
            self.history.pop()

        return data

    def read_all(self):
        '''Returns all the remaining data.'''
        return self.obj.read()

    def write(self, data):
        return self.obj.write(data)

    # TODO: create contextmanager
    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)
