"""Shared fixtures: canned service responses and a fake HTTP session."""

import pytest

from google_geocoding import GeocodingClient

PARIS_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<kml xmlns="http://earth.google.com/kml/2.0"><Response>
  <name>48.8698008,2.3075859</name>
  <Status>
    <code>200</code>
    <request>geocode</request>
  </Status>
  <Placemark id="p1">
    <address>86 Avenue des Champs-Élysées, 75008 Paris, France</address>
    <AddressDetails Accuracy="8" xmlns="urn:oasis:names:tc:ciq:xsdschema:xAL:2.0">
      <Country>
        <CountryNameCode>FR</CountryNameCode>
        <CountryName>France</CountryName>
        <AdministrativeArea>
          <AdministrativeAreaName>Ile-de-France</AdministrativeAreaName>
          <SubAdministrativeArea>
            <SubAdministrativeAreaName>Paris</SubAdministrativeAreaName>
            <Locality>
              <LocalityName>Paris</LocalityName>
              <DependentLocality>
                <DependentLocalityName>8eme Arrondissement</DependentLocalityName>
                <Thoroughfare>
                  <ThoroughfareName>86 Avenue des Champs-Élysées</ThoroughfareName>
                </Thoroughfare>
                <PostalCode>
                  <PostalCodeNumber>75008</PostalCodeNumber>
                </PostalCode>
              </DependentLocality>
            </Locality>
          </SubAdministrativeArea>
        </AdministrativeArea>
      </Country>
    </AddressDetails>
    <ExtendedData>
      <LatLonBox north="48.8729484" south="48.8666532" east="2.3107335" west="2.3044383" />
    </ExtendedData>
    <Point><coordinates>2.3075859,48.8698008,0</coordinates></Point>
  </Placemark>
  <Placemark id="p2">
    <address>8eme Arrondissement, Paris, France</address>
    <AddressDetails Accuracy="4" xmlns="urn:oasis:names:tc:ciq:xsdschema:xAL:2.0">
      <Country>
        <CountryNameCode>FR</CountryNameCode>
        <CountryName>France</CountryName>
        <AdministrativeArea>
          <AdministrativeAreaName>Ile-de-France</AdministrativeAreaName>
          <SubAdministrativeArea>
            <SubAdministrativeAreaName>Paris</SubAdministrativeAreaName>
            <Locality>
              <LocalityName>Paris</LocalityName>
            </Locality>
          </SubAdministrativeArea>
        </AdministrativeArea>
      </Country>
    </AddressDetails>
    <Point><coordinates>2.3125185,48.8727208,0</coordinates></Point>
  </Placemark>
  <Placemark id="p3">
    <address>France</address>
    <AddressDetails Accuracy="1" xmlns="urn:oasis:names:tc:ciq:xsdschema:xAL:2.0">
      <Country>
        <CountryNameCode>FR</CountryNameCode>
        <CountryName>France</CountryName>
      </Country>
    </AddressDetails>
    <Point><coordinates>2.2137490,46.2276380,0</coordinates></Point>
  </Placemark>
</Response></kml>
"""

EMPTY_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<kml xmlns="http://earth.google.com/kml/2.0"><Response>
  <name>nowhere</name>
  <Status><code>602</code><request>geocode</request></Status>
</Response></kml>
"""


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code


class FakeSession:
    """Records every get() call and answers with a canned response."""

    def __init__(self, body=PARIS_XML, status_code=200, error=None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body, self.status_code)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return GeocodingClient(session=session)
