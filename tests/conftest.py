"""Pytest fixtures for METS Distiller tests."""

import pytest

SAMPLE_METS = """<?xml version="1.0" encoding="UTF-8"?>
<mets:mets xmlns:mets="http://www.loc.gov/METS/"
           xmlns:premis="info:lc/xmlns/premis-v2"
           xmlns:dc="http://purl.org/dc/elements/1.1/"
           xmlns:dcterms="http://purl.org/dc/terms/"
           xmlns:xlink="http://www.w3.org/1999/xlink"
           xmlns:fits="http://hul.harvard.edu/ois/xml/ns/fits/fits_output">
  <mets:metsHdr CREATEDATE="2020-05-01T10:00:00" LASTMODDATE="2020-05-02T10:00:00"/>
  <mets:dmdSec ID="dmdSec_1">
    <mets:mdWrap MDTYPE="DC">
      <mets:xmlData>
        <dcterms:dublincore>
          <dc:title>Sample Transfer Title</dc:title>
          <dc:identifier>COLL-001</dc:identifier>
          <dc:description>A sample transfer</dc:description>
        </dcterms:dublincore>
      </mets:xmlData>
    </mets:mdWrap>
  </mets:dmdSec>
  <mets:dmdSec ID="dmdSec_2">
    <mets:mdWrap MDTYPE="PREMIS:OBJECT">
      <mets:xmlData>
        <premis:object>
          <premis:originalName>image.tif</premis:originalName>
        </premis:object>
      </mets:xmlData>
    </mets:mdWrap>
  </mets:dmdSec>
  <mets:dmdSec ID="dmdSec_3">
    <mets:mdWrap MDTYPE="DC">
      <mets:xmlData>
        <dcterms:dublincore>
          <dc:title>Image One</dc:title>
          <dc:creator>A. Photographer</dc:creator>
          <dc:language>en</dc:language>
          <dc:language>fr</dc:language>
          <dc:subject>landscapes</dc:subject>
          <dc:subject>rivers</dc:subject>
          <dc:rights>CC BY 4.0</dc:rights>
          <dcterms:isPartOf>Series A</dcterms:isPartOf>
        </dcterms:dublincore>
      </mets:xmlData>
    </mets:mdWrap>
  </mets:dmdSec>
  <mets:amdSec ID="amdSec_1">
    <mets:techMD ID="techMD_1">
      <mets:mdWrap MDTYPE="PREMIS:OBJECT">
        <mets:xmlData>
          <premis:object>
            <premis:objectIdentifier>
              <premis:objectIdentifierType>UUID</premis:objectIdentifierType>
              <premis:objectIdentifierValue>0b1c-uuid-image</premis:objectIdentifierValue>
            </premis:objectIdentifier>
            <premis:objectCharacteristics>
              <premis:fixity>
                <premis:messageDigestAlgorithm>sha256</premis:messageDigestAlgorithm>
                <premis:messageDigest>a1b2c3d4e5f6</premis:messageDigest>
              </premis:fixity>
              <premis:size>2048</premis:size>
              <premis:format>
                <premis:formatDesignation>
                  <premis:formatName>TIFF</premis:formatName>
                  <premis:formatVersion>6.0</premis:formatVersion>
                </premis:formatDesignation>
                <premis:formatRegistry>
                  <premis:formatRegistryName>PRONOM</premis:formatRegistryName>
                  <premis:formatRegistryKey>fmt/353</premis:formatRegistryKey>
                </premis:formatRegistry>
              </premis:format>
              <premis:creatingApplication>
                <premis:dateCreatedByApplication>2019-01-01T00:00:00</premis:dateCreatedByApplication>
              </premis:creatingApplication>
              <premis:objectCharacteristicsExtension>
                <fits:fits>
                  <fits:identification>
                    <fits:identity format="Tagged Image File Format" mimetype="image/tiff"
                                   toolname="FITS" toolversion="1.1.0"/>
                  </fits:identification>
                  <fits:fileinfo>
                    <fits:filepath>/var/archivematica/objects/image.tif</fits:filepath>
                    <fits:filename>image.tif</fits:filename>
                    <fits:md5checksum>abcd1234</fits:md5checksum>
                  </fits:fileinfo>
                </fits:fits>
              </premis:objectCharacteristicsExtension>
            </premis:objectCharacteristics>
            <premis:originalName>%transferDirectory%objects/image.tif</premis:originalName>
          </premis:object>
        </mets:xmlData>
      </mets:mdWrap>
    </mets:techMD>
    <mets:digiprovMD ID="digiprovMD_1">
      <mets:mdWrap MDTYPE="PREMIS:EVENT">
        <mets:xmlData>
          <premis:event>
            <premis:eventIdentifier>
              <premis:eventIdentifierType>UUID</premis:eventIdentifierType>
              <premis:eventIdentifierValue>ev-1</premis:eventIdentifierValue>
            </premis:eventIdentifier>
            <premis:eventType>format identification</premis:eventType>
            <premis:eventDateTime>2020-04-30T12:00:00</premis:eventDateTime>
            <premis:eventDetailInformation>
              <premis:eventDetail>program="Siegfried"; version="1.8.0"</premis:eventDetail>
            </premis:eventDetailInformation>
            <premis:eventOutcomeInformation>
              <premis:eventOutcome>Positive</premis:eventOutcome>
              <premis:eventOutcomeDetail>
                <premis:eventOutcomeDetailNote>fmt/353</premis:eventOutcomeDetailNote>
              </premis:eventOutcomeDetail>
            </premis:eventOutcomeInformation>
          </premis:event>
        </mets:xmlData>
      </mets:mdWrap>
    </mets:digiprovMD>
    <mets:digiprovMD ID="digiprovMD_2">
      <mets:mdWrap MDTYPE="PREMIS:EVENT">
        <mets:xmlData>
          <premis:event>
            <premis:eventIdentifier>
              <premis:eventIdentifierValue>ev-2</premis:eventIdentifierValue>
            </premis:eventIdentifier>
            <premis:eventType>message digest calculation</premis:eventType>
            <premis:eventDateTime>2020-04-30T12:00:01</premis:eventDateTime>
            <premis:eventDetailInformation>
              <premis:eventDetail>program="python"; module="hashlib.sha256()"</premis:eventDetail>
            </premis:eventDetailInformation>
          </premis:event>
        </mets:xmlData>
      </mets:mdWrap>
    </mets:digiprovMD>
    <mets:digiprovMD ID="digiprovMD_3">
      <mets:mdWrap MDTYPE="PREMIS:AGENT">
        <mets:xmlData>
          <premis:agent>
            <premis:agentIdentifier>
              <premis:agentIdentifierType>preservation system</premis:agentIdentifierType>
              <premis:agentIdentifierValue>Archivematica-1.11</premis:agentIdentifierValue>
            </premis:agentIdentifier>
            <premis:agentName>Archivematica</premis:agentName>
            <premis:agentType>software</premis:agentType>
          </premis:agent>
        </mets:xmlData>
      </mets:mdWrap>
    </mets:digiprovMD>
    <mets:digiprovMD ID="digiprovMD_4">
      <mets:mdWrap MDTYPE="OTHER">
        <mets:xmlData><note>not provenance</note></mets:xmlData>
      </mets:mdWrap>
    </mets:digiprovMD>
  </mets:amdSec>
  <mets:amdSec ID="amdSec_2">
    <mets:techMD ID="techMD_2">
      <mets:mdWrap MDTYPE="PREMIS:OBJECT">
        <mets:xmlData>
          <premis:object>
            <premis:objectCharacteristics>
              <premis:fixity>
                <premis:messageDigestAlgorithm>md5</premis:messageDigestAlgorithm>
                <premis:messageDigest>ffff0000</premis:messageDigest>
              </premis:fixity>
              <premis:size>512</premis:size>
              <premis:format>
                <premis:formatDesignation>
                  <premis:formatName>Plain Text File</premis:formatName>
                </premis:formatDesignation>
                <premis:formatRegistry>
                  <premis:formatRegistryName>PRONOM</premis:formatRegistryName>
                  <premis:formatRegistryKey>x-fmt/111</premis:formatRegistryKey>
                </premis:formatRegistry>
              </premis:format>
            </premis:objectCharacteristics>
          </premis:object>
        </mets:xmlData>
      </mets:mdWrap>
    </mets:techMD>
    <mets:digiprovMD ID="digiprovMD_5">
      <mets:mdWrap MDTYPE="PREMIS:EVENT">
        <mets:xmlData>
          <premis:event>
            <premis:eventIdentifier>
              <premis:eventIdentifierValue>ev-3</premis:eventIdentifierValue>
            </premis:eventIdentifier>
            <premis:eventType>ingestion</premis:eventType>
            <premis:eventDateTime>2020-04-30T12:00:02</premis:eventDateTime>
          </premis:event>
        </mets:xmlData>
      </mets:mdWrap>
    </mets:digiprovMD>
  </mets:amdSec>
  <mets:amdSec ID="amdSec_3">
    <mets:rightsMD ID="rightsMD_1"/>
  </mets:amdSec>
  <mets:fileSec>
    <mets:fileGrp USE="original">
      <mets:file ID="file-1" ADMID="amdSec_1">
        <mets:FLocat LOCTYPE="OTHER" xlink:href="objects/image.tif"/>
      </mets:file>
      <mets:file ID="file-2" ADMID="amdSec_2">
        <mets:FLocat LOCTYPE="OTHER" xlink:href="objects/docs/notes.txt"/>
      </mets:file>
    </mets:fileGrp>
    <mets:fileGrp USE="metadata">
      <mets:file ID="file-3" ADMID="amdSec_3">
        <mets:FLocat LOCTYPE="OTHER" xlink:href="objects/metadata/transfers/log.txt"/>
      </mets:file>
    </mets:fileGrp>
  </mets:fileSec>
  <mets:structMap TYPE="physical" ID="structMap_1" LABEL="Archivematica default">
    <mets:div TYPE="Directory" LABEL="sample-transfer">
      <mets:div TYPE="Directory" LABEL="objects" DMDID="dmdSec_1">
        <mets:div TYPE="Item" LABEL="image.tif" DMDID="dmdSec_2 dmdSec_3">
          <mets:fptr FILEID="file-1"/>
        </mets:div>
        <mets:div TYPE="Directory" LABEL="docs">
          <mets:div TYPE="Item" LABEL="notes.txt">
            <mets:fptr FILEID="file-2"/>
          </mets:div>
        </mets:div>
      </mets:div>
    </mets:div>
  </mets:structMap>
  <mets:structMap TYPE="logical" ID="structMap_2" LABEL="Normative Directory Structure">
    <mets:div TYPE="Directory" LABEL="normative-root"/>
  </mets:structMap>
</mets:mets>
"""

MINIMAL_METS = """<?xml version="1.0" encoding="UTF-8"?>
<mets xmlns="http://www.loc.gov/METS/"
      xmlns:premis="http://www.loc.gov/premis/v3"
      xmlns:dc="http://purl.org/dc/elements/1.1/"
      xmlns:xlink="http://www.w3.org/1999/xlink">
  <metsHdr CREATEDATE="2021-03-04T05:06:07"/>
  <dmdSec ID="dmdSec_1">
    <mdWrap MDTYPE="PREMIS:OBJECT">
      <xmlData><premis:object/></xmlData>
    </mdWrap>
  </dmdSec>
  <amdSec ID="amdSec_1">
    <techMD ID="techMD_1">
      <mdWrap MDTYPE="PREMIS:OBJECT">
        <xmlData>
          <premis:object>
            <premis:objectCharacteristics>
              <premis:fixity>
                <premis:messageDigestAlgorithm>md5</premis:messageDigestAlgorithm>
                <premis:messageDigest>abcd1234</premis:messageDigest>
              </premis:fixity>
              <premis:size>2048</premis:size>
              <premis:format>
                <premis:formatDesignation>
                  <premis:formatName>TIFF</premis:formatName>
                  <premis:formatVersion>6.0</premis:formatVersion>
                </premis:formatDesignation>
              </premis:format>
            </premis:objectCharacteristics>
          </premis:object>
        </xmlData>
      </mdWrap>
    </techMD>
  </amdSec>
  <fileSec>
    <fileGrp USE="original">
      <file ID="file-1" ADMID="amdSec_1">
        <FLocat xlink:href="objects/image.tif"/>
      </file>
    </fileGrp>
  </fileSec>
  <structMap TYPE="physical" LABEL="Archivematica default">
    <div TYPE="Directory" LABEL="sample-transfer">
      <div TYPE="Directory" LABEL="objects">
        <div TYPE="Item" LABEL="image.tif">
          <fptr FILEID="file-1"/>
        </div>
      </div>
    </div>
  </structMap>
</mets>
"""


@pytest.fixture
def sample_mets_xml() -> bytes:
    """Archivematica-style METS with two described files and one auxiliary amdSec.

    Files:
        objects/image.tif        amdSec_1, sha256 fixity, FITS md5, DMDID dmdSec_2 dmdSec_3
        objects/docs/notes.txt   amdSec_2, md5 fixity, no DMDID
    """
    return SAMPLE_METS.encode("utf-8")


@pytest.fixture
def sample_mets_file(tmp_path, sample_mets_xml):
    """Write the sample METS to a temporary file."""
    path = tmp_path / "METS.sample.xml"
    path.write_bytes(sample_mets_xml)
    return path


@pytest.fixture
def minimal_mets_xml() -> bytes:
    """Default-namespace METS with one file and no transfer-level Dublin Core."""
    return MINIMAL_METS.encode("utf-8")


@pytest.fixture
def minimal_mets_file(tmp_path, minimal_mets_xml):
    """Write the minimal METS to a temporary file."""
    path = tmp_path / "METS.minimal.xml"
    path.write_bytes(minimal_mets_xml)
    return path
