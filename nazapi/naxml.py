#
# Copyright (c) 2014 - 2026  StorPool.
# All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
""" Low-level helpers for the ZAPI XmlObject implementation and envelope. """

import collections
import functools
import xml.parsers.expat

import xmltodict

from . import nacatch


ZAPI_VERSION = '1.21'
ZAPI_XMLNS = 'http://www.netapp.com/filer/admin'
ENCODING = 'UTF-8'


class ResultStatus(collections.namedtuple('ResultStatus', [
        'status', 'reason', 'errno'])):
    """ The outcome attributes of a <results> element. """

    __slots__ = ()

    @property
    def passed(self):
        return self.status == 'passed'


def encode(vserver, command):
    """ Wrap a command in the <netapp> envelope.

    The vfiler attribute is only present for a non-empty vserver name;
    the server treats an empty attribute differently from a missing one. """
    netapp = collections.OrderedDict()
    netapp['@xmlns'] = ZAPI_XMLNS
    netapp['@version'] = ZAPI_VERSION
    if vserver:
        netapp['@vfiler'] = vserver
    netapp[command.xmlTag] = command.to_xml()
    return xmltodict.unparse({'netapp': netapp}, encoding=ENCODING)


def decode(body):
    """ Parse a response envelope into its status and <results> tree.

    The returned tree still holds the status attributes under their
    xmltodict names ("@status" etc.) so that a result record may pick
    them up itself. """
    try:
        tree = xmltodict.parse(body)
    except xml.parsers.expat.ExpatError as err:
        raise nacatch.ProtocolDecodeError(
            'Malformed ZAPI response: {0}'.format(err), body)

    netapp = tree.get('netapp')
    results = netapp.get('results') if isinstance(netapp, dict) else None
    if not isinstance(results, dict):
        raise nacatch.ProtocolDecodeError(
            'No <results> element in the ZAPI response', body)

    return ResultStatus(
        results.get('@status'),
        results.get('@reason'),
        results.get('@errno'),
    ), results


def dumps(obj, pretty=False):
    """ Serialize a record as a standalone XML fragment. """
    return xmltodict.unparse({obj.xmlTag: obj.to_xml()},
                             full_document=False, pretty=pretty)


class XmlObjectImpl(object):
    """ Base class for a serializable value object; see XmlObject. """

    xmlTag = None

    def __new__(cls, data=None, **kwargs):
        """ Construct a value object as per its __xmlAttrDefs__. """

        if isinstance(data, cls):
            assert not kwargs, \
                "Unsupported update on already contructed object"
            return data

        j = dict(data) if data is not None else {}
        j.update(kwargs)

        self = super(XmlObjectImpl, cls).__new__(cls)
        object.__setattr__(self, '__xmlAttrs__', {})

        exc = None
        for attr, attr_def in self.__xmlAttrDefs__.items():
            values = []
            # pylint: disable=cell-var-from-loop
            # (the "handle" and "func" arguments are always
            #  evaluated immediately, never deferred)
            exc = nacatch.na_catch(
                values.append,
                lambda: attr_def.handleVal(j[attr]) if attr in j
                else attr_def.defaultVal(),
                exc)
            if values:
                self.__xmlAttrs__[attr] = values[0]
            else:
                self.__xmlAttrs__[attr] = None
        nacatch.na_caught(exc, self.__class__.__name__, self)

        return self

    @classmethod
    def from_xml(cls, node):
        """ Build a record out of an xmltodict element tree. """
        if node is None:
            node = {}
        elif not isinstance(node, dict):
            nacatch.error('{name}: expected child elements, got {node!r}',
                          name=cls.__name__, node=node)

        data = {}
        exc = None
        for attr, attr_def in cls.__xmlAttrDefs__.items():
            tag = cls.__xmlTags__[attr]
            if tag not in node:
                continue
            child = node[tag]
            if attr_def.xmlTag is not None and attr_def.xmlTag != tag:
                child = child.get(attr_def.xmlTag) \
                    if isinstance(child, dict) else None
            # pylint: disable=cell-var-from-loop
            exc = nacatch.na_catch(
                functools.partial(data.__setitem__, attr),
                lambda: attr_def.fromXml(child),
                exc)

        obj = cls(data)
        nacatch.na_caught(exc, cls.__name__, obj)
        return obj

    def to_xml(self):
        """ Build an xmltodict tree of the children, skipping unset ones. """
        res = collections.OrderedDict()
        for attr, attr_def in self.__xmlAttrDefs__.items():
            value = self.__xmlAttrs__[attr]
            if value is None:
                continue
            tag = self.__xmlTags__[attr]
            node = attr_def.toXml(value)
            if attr_def.xmlTag is not None and attr_def.xmlTag != tag:
                node = {attr_def.xmlTag: node}
            res[tag] = node
        return res

    def __getattr__(self, attr):
        if attr not in self.__xmlAttrs__:
            error = "'{cls}' has no attribute '{attr}'".format(
                cls=self.__class__.__name__, attr=attr)
            raise AttributeError(error)

        return self.__xmlAttrs__[attr]

    def __setattr__(self, attr, value):
        if attr not in self.__xmlAttrDefs__:
            error = "'{cls}' has no attribute '{attr}'".format(
                cls=self.__class__.__name__, attr=attr)
            raise AttributeError(error)

        self.__xmlAttrs__[attr] = self.__xmlAttrDefs__[attr].handleVal(value)

    def __eq__(self, other):
        return type(self) is type(other) and \
            self.__xmlAttrs__ == other.__xmlAttrs__

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def to_json(self):
        """ Store the member fields into a dictionary. """
        return dict(
            (attr, getattr(self, attr)) for attr in self.__xmlAttrDefs__)

    def __iter__(self):
        return iter(self.to_json().items())

    _asdict = to_json
    __str__ = __repr__ = lambda self: str(self.to_json())
